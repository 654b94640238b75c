# beatmap_cloner/ui.py

import customtkinter as ctk
from tkinter import filedialog, messagebox
from pathlib import Path
import logging
import threading # Clone runs off the UI thread
from typing import Optional

from beatmap_cloner.config import AppConfig
from beatmap_cloner.cloner import BeatmapCloner, read_template_metadata, summarize_beatmap
from beatmap_cloner.errors import BeatmapClonerError
from beatmap_cloner.models import BeatmapMetadata, DIFFICULTY_PRESETS, GAME_MODES

METADATA_FIELDS = (
    ("title", "Title:"),
    ("title_unicode", "Title (Unicode):"),
    ("artist", "Artist:"),
    ("artist_unicode", "Artist (Unicode):"),
    ("creator", "Creator:"),
    ("source", "Source:"),
    ("tags", "Tags:"),
)

OPTION_LABELS = (
    ("keep_timing_points", "Keep timing points (BPM and kiai only)"),
    ("remove_skin_files", "Remove skin files"),
    ("reset_sample_set", "Reset sample set to Normal"),
    ("reset_difficulty", "Reset difficulty settings"),
    ("remove_colours", "Remove combo colours"),
)


class AppUI(ctk.CTk):
    def __init__(self, config: AppConfig, cloner: BeatmapCloner):
        super().__init__()

        self.app_config = config
        self.cloner = cloner
        self.logger = logging.getLogger(__name__)
        self.source_folder: Optional[Path] = None

        self.title("osu! Beatmap Cloner")
        self.geometry("760x720")
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._create_widgets()
        self._load_current_settings()

    def _create_widgets(self):
        # --- Source beatmap ---
        self.source_frame = ctk.CTkFrame(self)
        self.source_frame.grid(row=0, column=0, padx=10, pady=10, sticky="ew")
        self.source_frame.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(self.source_frame, text="Source Beatmap:").grid(row=0, column=0, padx=5, pady=5, sticky="w")
        self.source_entry = ctk.CTkEntry(self.source_frame, placeholder_text="Select a beatmap folder inside your Songs folder...")
        self.source_entry.grid(row=0, column=1, padx=5, pady=5, sticky="ew")
        self.source_button = ctk.CTkButton(self.source_frame, text="Browse", command=self._browse_source)
        self.source_button.grid(row=0, column=2, padx=5, pady=5)

        self.summary_label = ctk.CTkLabel(self.source_frame, text="No beatmap selected.", anchor="w")
        self.summary_label.grid(row=1, column=0, columnspan=3, padx=5, pady=2, sticky="ew")

        # --- Target mode and difficulties ---
        self.target_frame = ctk.CTkFrame(self)
        self.target_frame.grid(row=1, column=0, padx=10, pady=10, sticky="ew")
        self.target_frame.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(self.target_frame, text="Game Mode:").grid(row=0, column=0, padx=5, pady=5, sticky="w")
        self.mode_optionmenu = ctk.CTkOptionMenu(self.target_frame, values=list(GAME_MODES),
                                                 command=self._on_mode_changed)
        self.mode_optionmenu.grid(row=0, column=1, padx=5, pady=5, sticky="w")

        self.difficulty_frame = ctk.CTkFrame(self.target_frame)
        self.difficulty_frame.grid(row=1, column=0, columnspan=2, padx=5, pady=5, sticky="ew")
        self.difficulty_checkboxes = {}

        ctk.CTkLabel(self.target_frame, text="Extra difficulty:").grid(row=2, column=0, padx=5, pady=5, sticky="w")
        self.extra_difficulty_entry = ctk.CTkEntry(self.target_frame, placeholder_text="Optional custom difficulty name")
        self.extra_difficulty_entry.grid(row=2, column=1, padx=5, pady=5, sticky="ew")

        # --- Metadata and options ---
        self.details_frame = ctk.CTkScrollableFrame(self)
        self.details_frame.grid(row=2, column=0, padx=10, pady=10, sticky="nsew")
        self.details_frame.grid_columnconfigure(1, weight=1)

        self.metadata_entries = {}
        for row, (field_name, label) in enumerate(METADATA_FIELDS):
            ctk.CTkLabel(self.details_frame, text=label).grid(row=row, column=0, padx=5, pady=3, sticky="w")
            entry = ctk.CTkEntry(self.details_frame)
            entry.grid(row=row, column=1, padx=5, pady=3, sticky="ew")
            self.metadata_entries[field_name] = entry

        self.option_checkboxes = {}
        for offset, (option, label) in enumerate(OPTION_LABELS):
            checkbox = ctk.CTkCheckBox(self.details_frame, text=label)
            checkbox.grid(row=len(METADATA_FIELDS) + offset, column=0, columnspan=2, padx=5, pady=3, sticky="w")
            self.option_checkboxes[option] = checkbox

        # --- Clone control and status ---
        self.control_frame = ctk.CTkFrame(self)
        self.control_frame.grid(row=3, column=0, padx=10, pady=10, sticky="ew")
        self.control_frame.grid_columnconfigure(0, weight=1)

        self.clone_button = ctk.CTkButton(self.control_frame, text="Clone Beatmap", command=self._start_clone_thread)
        self.clone_button.grid(row=0, column=0, padx=5, pady=10, sticky="ew")

        self.status_label = ctk.CTkLabel(self.control_frame, text="Ready.", wraplength=720)
        self.status_label.grid(row=1, column=0, padx=5, pady=5, sticky="ew")

    def _load_current_settings(self):
        """Loads settings from the config and updates UI elements."""
        mode = self.app_config.default_game_mode
        if mode not in GAME_MODES:
            mode = "taiko"
        self.mode_optionmenu.set(mode)
        self._update_difficulty_checkboxes(mode)

        for option, checkbox in self.option_checkboxes.items():
            if self.app_config.clone_options.get(option, True):
                checkbox.select()
            else:
                checkbox.deselect()

    def _save_settings(self):
        """Saves the current mode and option checkboxes as defaults."""
        self.app_config.set_setting("default_game_mode", self.mode_optionmenu.get())
        self.app_config.set_setting("clone_options", self._selected_options())

    def _on_mode_changed(self, mode: str):
        self._update_difficulty_checkboxes(mode)

    def _update_difficulty_checkboxes(self, mode: str):
        """Clears and repopulates the difficulty checkboxes for `mode`."""
        for widget in self.difficulty_frame.winfo_children():
            widget.destroy()
        self.difficulty_checkboxes = {}

        for column, name in enumerate(DIFFICULTY_PRESETS[mode]):
            checkbox = ctk.CTkCheckBox(self.difficulty_frame, text=name)
            checkbox.grid(row=0, column=column, padx=5, pady=5, sticky="w")
            self.difficulty_checkboxes[name] = checkbox

    def _browse_source(self):
        """Opens a directory dialog to pick the beatmap folder to clone."""
        initial_dir = self.app_config.songs_directory
        folder = filedialog.askdirectory(
            title="Select Source Beatmap Folder",
            initialdir=str(initial_dir) if initial_dir else None,
        )
        if not folder:
            return

        self.source_folder = Path(folder)
        self.source_entry.delete(0, ctk.END)
        self.source_entry.insert(0, str(self.source_folder))

        try:
            summary = summarize_beatmap(self.source_folder)
            if summary is None:
                self._update_status("No .osu files found in the selected folder.", "orange")
                self.summary_label.configure(text="No charts found.")
                return
            template = read_template_metadata(self.source_folder)
        except BeatmapClonerError as e:
            self._update_status(f"Error: {e}", "red")
            return

        self.summary_label.configure(
            text=f"{summary.title} | mapped by {summary.creator} | {len(summary.chart_files)} chart(s)"
        )
        self._fill_metadata(template)
        self._update_status(f"Loaded {summary.folder_name}", "white")

    def _fill_metadata(self, metadata: BeatmapMetadata):
        for field_name, entry in self.metadata_entries.items():
            entry.delete(0, ctk.END)
            entry.insert(0, getattr(metadata, field_name))

    def _selected_difficulties(self) -> list:
        names = [name for name, checkbox in self.difficulty_checkboxes.items() if checkbox.get() == 1]
        extra = self.extra_difficulty_entry.get().strip()
        if extra and extra not in names:
            names.append(extra)
        return names

    def _selected_options(self) -> dict:
        return {option: checkbox.get() == 1 for option, checkbox in self.option_checkboxes.items()}

    def _entered_metadata(self) -> BeatmapMetadata:
        values = {field_name: entry.get().strip() for field_name, entry in self.metadata_entries.items()}
        return BeatmapMetadata(**values)

    def _update_status(self, message: str, color: str = "white"):
        """Updates the status label."""
        self.status_label.configure(text=message, text_color=color)
        self.update_idletasks() # Refresh UI

    def _start_clone_thread(self):
        """Starts the clone in a separate thread to keep the UI responsive."""
        if self.source_folder is None:
            messagebox.showwarning("No Beatmap", "Please select a source beatmap folder to clone.")
            return

        difficulties = self._selected_difficulties()
        if not difficulties:
            messagebox.showwarning("No Difficulties", "Please select at least one difficulty to create.")
            return

        try:
            request = self.cloner.build_request(
                self.source_folder,
                self.mode_optionmenu.get(),
                difficulties,
                self._entered_metadata(),
                **self._selected_options(),
            )
        except BeatmapClonerError as e:
            messagebox.showerror("Error", str(e))
            self._update_status(f"Error: {e}", "red")
            return

        self._save_settings()
        self.clone_button.configure(state="disabled", text="Cloning...")
        self._update_status(f"Cloning {self.source_folder.name}...", "white")

        clone_thread = threading.Thread(target=self._run_clone, args=(request,), daemon=True)
        clone_thread.start()

    def _run_clone(self, request):
        """The actual clone, run in a separate thread."""
        try:
            folder_name = self.cloner.clone_beatmap(request)
        except BeatmapClonerError as e:
            self.logger.error(f"Clone failed: {e}")
            self.after(0, self._finish_clone, f"Error: {e}", False)
        except Exception as e:
            self.logger.exception("Unexpected error while cloning")
            self.after(0, self._finish_clone, f"Unexpected error: {e}", False)
        else:
            self.after(0, self._finish_clone, f"Successfully created beatmap: {folder_name}", True)

    def _finish_clone(self, message: str, success: bool):
        if success:
            messagebox.showinfo("Clone Complete", message)
            self._update_status(message, "green")
        else:
            messagebox.showerror("Clone Failed", message)
            self._update_status(message, "red")
        self.clone_button.configure(state="normal", text="Clone Beatmap")
