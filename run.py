# -*- coding: utf-8 -*-

"""
Main entry point for launching the Validation Builder application.
"""

import logging
import tkinter as tk

import sv_ttk

from validation_builder.logging_config import setup_logging
from validation_builder.app import ValidationBuilderApp


def main():
    """
    Configure logging, main window, and launch application.
    """
    setup_logging()

    root = tk.Tk()
    root.title("Validation Builder")
    window_width, window_height = 720, 860
    # Calculate position to center the window
    screen_width = root.winfo_screenwidth()
    screen_height = root.winfo_screenheight()
    pos_x = (screen_width // 2) - (window_width // 2)
    pos_y = max(0, (screen_height // 2) - (window_height // 2))
    root.geometry(f"{window_width}x{window_height}+{pos_x}+{pos_y}")
    root.minsize(560, 600)

    sv_ttk.set_theme("light")

    ValidationBuilderApp(root)

    root.mainloop()
    logging.info("===== Application terminated =====")


if __name__ == '__main__':
    main()
