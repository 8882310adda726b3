"""Pure formulas for distance, speed and calories."""
