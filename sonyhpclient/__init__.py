"""Message framing, command payloads, state holders and settings for Sony Bluetooth headphones."""

__version__ = "1.3.13"