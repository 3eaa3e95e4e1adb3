"""
Data models for RunOrRaise window matching.

This module contains the dataclass describing one Hyprland client as
reported by ``hyprctl clients -j`` / ``hyprctl activewindow -j``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WindowInfo:
    """
    Information about an open window at query time.
    
    Attributes:
        address: Hyprland window address, unique within one snapshot
        class_name: The window class (always present)
        initial_class: Class the window was mapped with
        title: The current window title
        initial_title: Title the window was mapped with
        tag: Hyprland window tag(s)
        xdg_tag: XDG toplevel tag
    """
    address: str
    class_name: str
    initial_class: str | None = None
    title: str | None = None
    initial_title: str | None = None
    tag: str | None = None
    xdg_tag: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "WindowInfo":
        """
        Build a WindowInfo from a hyprctl client JSON object.
        
        :param data: Decoded client object
        :return: WindowInfo instance
        :raises ValueError: If the object lacks an address or class
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a client object, got {type(data).__name__}")

        address = data.get("address")
        class_name = data.get("class")
        if not isinstance(address, str) or not isinstance(class_name, str):
            raise ValueError("Client object requires string 'address' and 'class' keys")

        return cls(
            address=address,
            class_name=class_name,
            initial_class=_optional_str(data.get("initialClass")),
            title=_optional_str(data.get("title")),
            initial_title=_optional_str(data.get("initialTitle")),
            tag=_optional_str(data.get("tag")),
            xdg_tag=_optional_str(data.get("xdgTag")),
        )

    def __str__(self) -> str:
        return f"{self.class_name} ({self.address})"


def _optional_str(value) -> str | None:
    return value if isinstance(value, str) else None
