"""Tk/Matplotlib host for the smoothed area curve."""
