# app.py
# CustomTkinter GUI for the sentence anagram engine (dark theme).
# - Load the bundled word list or any newline-delimited dictionary file.
# - Background loading thread (keeps UI responsive).
# - Search on Enter / debounced typing; results & event log panes.

from __future__ import annotations
import threading
from typing import List, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (ensure PYTHONPATH=src or the package is installed)
from anagrams.config import MAX_RESULTS
from anagrams.engine import Engine


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def format_anagrams(rows: List[List[str]], limit: int = MAX_RESULTS) -> str:
    """One numbered sentence per line, with a trailer when rows were cut."""
    if not rows:
        return "(no anagrams)"
    lines = [f"{i:<4} {' '.join(words)}" for i, words in enumerate(rows[:limit], 1)]
    if len(rows) > limit:
        lines.append(f"... {len(rows) - limit} more")
    return "\n".join(lines)


# -------------------- main app --------------------

class AnagramApp(ctk.CTk):
    """Dark-themed GUI that loads a dictionary and lists sentence anagrams."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Sentence Anagrams")
        self.geometry("820x600")
        self.minsize(720, 520)

        # State
        self._engine = Engine()
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None

        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=0)  # log

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
        ctk.CTkLabel(header, text="Sentence Anagrams", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(2, weight=1)

        ctk.CTkButton(bar, text="Bundled list", command=lambda: self._start_loading(None)).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )
        ctk.CTkButton(bar, text="Choose dictionary", command=self._choose_file).grid(
            row=0, column=1, padx=(0, 6), pady=10
        )

        self.lbl_source = ctk.CTkLabel(bar, text="No dictionary loaded", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=2, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=3, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Sentence:", font=self.font_label).grid(row=0, column=0, sticky="w", padx=12, pady=10)
        self.entry_query = ctk.CTkEntry(box, placeholder_text="e.g. Yes man")
        self.entry_query.grid(row=0, column=1, sticky="ew", padx=(6, 12), pady=10)
        self.entry_query.bind("<Return>", lambda _ev: self._do_search())
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

    def _build_results(self) -> None:
        self.txt_results = ctk.CTkTextbox(self, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        self.txt_results.configure(state="disabled")
        self._set_results("(load a dictionary and type a sentence)")

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=100, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("GUI ready. Load a dictionary to begin.")

    # --------- loading pipeline (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose word list",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")],
        )
        if path:
            self._start_loading(path)

    def _start_loading(self, path: Optional[str]) -> None:
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A dictionary is already loading. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(path) if path else "Bundled word list")
        self._set_status("Loading…")
        self.progress.start()

        self._loading_thread = threading.Thread(target=self._load_worker, args=(path,), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: Optional[str]) -> None:
        eng = Engine()
        try:
            eng.build(path)
        except (OSError, ValueError) as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, lambda: self._on_load_ok(eng))

    def _on_load_ok(self, eng: Engine) -> None:
        self.progress.stop()
        self._engine = eng
        n = eng.index.size if eng.index else 0
        self._set_status(f"Loaded {n:,} words.")
        self._log(f"Dictionary ready ({n} words).")
        self.entry_query.focus_set()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading dictionary.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load dictionary.\nSee event log for details.")

    # --------- search ---------

    def _on_query_changed(self, _ev=None) -> None:
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(400, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        q = self.entry_query.get()
        if not q.strip():
            self._set_results("")
            return
        if self._engine.index is None:
            self._set_results("error: please load a dictionary before searching.")
            return

        rows = self._engine.sentence_anagrams(q)
        self._log(f"{q!r}: {len(rows)} anagram(s)")
        self._set_results(format_anagrams(rows))

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

    def _on_close(self) -> None:
        self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = AnagramApp()
    app.mainloop()
