# beatmap_cloner/main.py

import customtkinter as ctk
import logging

from beatmap_cloner.config import AppConfig
from beatmap_cloner.cloner import BeatmapCloner
from beatmap_cloner.ui import AppUI
from beatmap_cloner.utils import setup_logging

def main():
    config = AppConfig()

    # Setup logging first
    setup_logging(log_file=config.log_file, level=logging.INFO)
    logger = logging.getLogger(__name__)
    logger.info("Application starting...")

    ctk.set_appearance_mode("System")
    ctk.set_default_color_theme("blue")

    cloner = BeatmapCloner(config)

    app = AppUI(config, cloner)
    app.mainloop()

    logger.info("Application closed.")

if __name__ == "__main__":
    main()
