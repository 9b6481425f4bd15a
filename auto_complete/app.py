# app.py
# CustomTkinter GUI for the weighted prefix autocomplete (dark theme).
# - Load a vocabulary file (weight<TAB>word per line) and pick the index type.
# - Background loading thread (keeps UI responsive).
# - Live search with debounce; results & event log panes.

from __future__ import annotations
import threading
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from autocompletor import config as CFG
from autocompletor.engine import Engine
from autocompletor.models import Completion


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


# -------------------- main app --------------------

class AutocompleteApp(ctk.CTk):
    """Dark-themed GUI that loads a vocabulary and queries the engine."""

    def __init__(self) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("Autocomplete")
        self.geometry("820x600")
        self.minsize(720, 520)

        # State
        self._engine: Optional[Engine] = None
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=1)  # log

        self._build_header()
        self._build_source_bar()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Weighted Autocomplete", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(2, weight=1)

        ctk.CTkButton(bar, text="Choose Vocabulary", command=self._choose_file).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )

        self.opt_impl = ctk.CTkOptionMenu(bar, values=list(CFG.IMPLEMENTATIONS))
        self.opt_impl.set(CFG.DEFAULT_IMPL)
        self.opt_impl.grid(row=0, column=1, padx=6, pady=10)

        self.lbl_source = ctk.CTkLabel(bar, text="No vocabulary selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=2, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=3, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: -", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Prefix:", font=self.font_label).grid(row=0, column=0, sticky="w", padx=12, pady=10)
        self.entry_query = ctk.CTkEntry(box, placeholder_text="Start typing a prefix…")
        self.entry_query.grid(row=0, column=1, sticky="ew", padx=6, pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

        self.entry_k = ctk.CTkEntry(box, width=60)
        self.entry_k.insert(0, str(CFG.TOP_K))
        self.entry_k.grid(row=0, column=2, padx=(6, 12), pady=10)
        self.entry_k.bind("<KeyRelease>", self._on_query_changed)

    def _build_results(self) -> None:
        self.txt_results = ctk.CTkTextbox(self, wrap="none", font=self.font_mono)
        self.txt_results.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        self.txt_results.configure(state="disabled")
        self._set_results("(no results yet: load a vocabulary and start typing)")

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("GUI ready. Choose a vocabulary file to begin.")

    # --------- loading pipeline (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose vocabulary",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")],
        )
        if path:
            self._start_loading(path, self.opt_impl.get())

    def _start_loading(self, path: str, impl: str) -> None:
        # prevent re-entrancy
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A vocabulary is already loading. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(path))
        self._set_status(f"Building {impl} index…")
        self.progress.start()

        self._loading_thread = threading.Thread(target=self._load_worker, args=(path, impl), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: str, impl: str) -> None:
        eng = Engine()
        try:
            eng.build(path, impl=impl)
        except (OSError, ValueError) as exc:
            self.after(0, self._on_load_error, exc)
            return
        self.after(0, self._on_load_ok, eng)

    def _on_load_ok(self, eng: Engine) -> None:
        self.progress.stop()
        self._engine = eng
        self._set_status(f"Loaded {len(eng):,} terms ({eng.impl}).")
        self._log(f"Vocabulary ready ({len(eng)} terms, {eng.impl} index).")
        self.entry_query.focus_set()
        self._do_search()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading vocabulary.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load vocabulary.\nSee event log for details.")

    # --------- search ---------

    def _on_query_changed(self, _ev=None) -> None:
        # debounce for smoother typing
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(120, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        if self._engine is None:
            self._set_results("error: please load a vocabulary before searching.")
            return
        try:
            k = int(self.entry_k.get())
        except ValueError:
            k = CFG.TOP_K

        rows = self._engine.complete(self.entry_query.get(), top_k=k)
        if not rows:
            self._set_results("(no matches)")
            return
        self._set_results("\n".join(self._fmt(i, r) for i, r in enumerate(rows, 1)))

    @staticmethod
    def _fmt(i: int, r: Completion) -> str:
        return f"{i:>3}  {r.weight:>16,.1f}  {r.word}"

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        if self._engine is not None:
            self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = AutocompleteApp()
    app.mainloop()
