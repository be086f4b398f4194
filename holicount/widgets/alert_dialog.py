"""Blocking alert dialog."""

from typing import ClassVar

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class AlertDialog(ModalScreen):
    """Modal alert that must be acknowledged before continuing."""

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("escape", "dismiss", "Close"),
    ]

    CSS = """
    AlertDialog {
        align: center middle;
    }

    #alert {
        width: 70;
        height: auto;
        background: $panel;
        border: thick $error;
        padding: 1 2;
    }

    #alert-message {
        width: 100%;
        margin-bottom: 1;
    }

    #ok-button {
        width: 100%;
    }
    """

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.message = message

    def compose(self) -> ComposeResult:
        """Compose the dialog."""
        with Vertical(id="alert"):
            yield Static(self.message, id="alert-message")
            yield Button("OK", id="ok-button", variant="error")

    def on_mount(self) -> None:
        """Focus the OK button."""
        self.query_one("#ok-button", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Close the dialog."""
        if event.button.id == "ok-button":
            self.dismiss(None)
