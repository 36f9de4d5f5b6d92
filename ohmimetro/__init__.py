"""Resistance from divider ADC readings, E24 matching, colour bands and an SSD1306 framebuffer."""

__version__ = "0.1.0"
__all__ = ["font", "ssd1306", "ohmmeter"]