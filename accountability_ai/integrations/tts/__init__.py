"""Text-to-speech integration."""

from .coqui import CoquiTTSClient

__all__ = ["CoquiTTSClient"]
