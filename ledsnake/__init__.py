"""Snake and scrolling text on an emulated 8x8 MAX7219 LED matrix."""

__version__ = "0.1.0"
__all__ = ["characters", "game", "ledcontrol", "text_displayer"]