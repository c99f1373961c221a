"""
Calculator GUI

Dark-themed keypad calculator (Tkinter) on top of backend.engine.CalculatorEngine.

- Every button click and key press becomes one engine token (see frontend.keymap).
- The window only paints what the engine exposes: display string, pending
  expression, memory indicator and history.
- History overlay lists the last calculations, most recent first.
- Ctrl+C / Ctrl+V copy the display and paste a number into the entry.
- Pressed buttons flash briefly (purely cosmetic).
"""

import logging
import tkinter as tk
from typing import Dict, Optional

from backend.engine import CalculatorEngine
from backend.tokens import Token
from frontend.keymap import KEYPAD_LAYOUT, token_for_key, token_for_label

logger = logging.getLogger(__name__)


# -------------------------
# Visual theme / constants
# -------------------------
WINDOW_WIDTH = 360
WINDOW_HEIGHT = 560

BG = "#0f1113"          # main app background
PANEL_BG = "#17181A"    # panels / container background
BTN_BG = "#2b2d30"      # button tile background
OP_BG = "#3a3322"       # operator tiles
FLASH_BG = "#4a6a8f"    # press feedback
FG = "#E6EEF3"          # foreground text (light)
MUTED_FG = "#8a9096"    # pending expression / inactive memory flag
ACCENT = "#cfeeff"      # accent color for titles, memory flag
ERROR_FG = "#ff6b6b"

TITLE_FONT = ("Segoe UI", 13, "bold")
DISPLAY_FONT = ("Consolas", 26)
PENDING_FONT = ("Consolas", 12)

FLASH_MS = 100

OPERATOR_LABELS = {"+", "-", "*", "/", "xʸ", "="}


# -------------------------
# Main application class
# -------------------------
class CalculatorGUI(tk.Tk):
    def __init__(self, engine: Optional[CalculatorEngine] = None):
        super().__init__()

        # Window setup
        self.title("Calculator")
        self.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.minsize(320, 480)
        self.configure(bg=BG)

        # Each window owns its own engine (state, memory and history)
        self.engine = engine if engine is not None else CalculatorEngine()

        self.history_window: Optional[tk.Toplevel] = None
        self.history_list: Optional[tk.Listbox] = None
        self.buttons: Dict[str, tk.Button] = {}

        self._build_header()
        self._build_display()
        self._build_keypad()

        # Keyboard input goes through the same token path as the keypad
        self.bind("<Key>", self._on_key)
        self.bind("<Control-c>", self._copy)
        self.bind("<Control-v>", self._paste)

        self._refresh()

    # -------------------------
    # Layout
    # -------------------------
    def _build_header(self):
        """Top header with title, memory indicator and history button."""
        header = tk.Frame(self, bg=PANEL_BG, height=48)
        header.pack(fill="x", side="top")

        tk.Label(header, text="Calculator", bg=PANEL_BG, fg=FG, font=TITLE_FONT).pack(side="left", padx=10, pady=6)

        self.memory_label = tk.Label(header, text="M", bg=PANEL_BG, fg=MUTED_FG, font=TITLE_FONT)
        self.memory_label.pack(side="left", padx=6)

        # Spacer to push the History button to the right
        tk.Frame(header, bg=PANEL_BG).pack(side="left", expand=True)

        self.history_btn = tk.Button(header, text="History", bg=PANEL_BG, fg=FG, relief="flat",
                                     command=self.toggle_history)
        self.history_btn.pack(side="right", padx=8, pady=6)

    def _build_display(self):
        disp = tk.Frame(self, bg=PANEL_BG)
        disp.pack(fill="x", padx=8, pady=(8, 0))

        self.pending_var = tk.StringVar()
        tk.Label(disp, textvariable=self.pending_var, bg=PANEL_BG, fg=MUTED_FG,
                 anchor="e", font=PENDING_FONT).pack(fill="x", padx=6, pady=(6, 0))

        self.display_var = tk.StringVar()
        self.display_label = tk.Label(disp, textvariable=self.display_var, bg=PANEL_BG, fg=FG,
                                      anchor="e", font=DISPLAY_FONT)
        self.display_label.pack(fill="x", padx=6, pady=(0, 8))

    def _build_keypad(self):
        """Uniform grid of tiles; empty labels become spacers."""
        tile_container = tk.Frame(self, bg=PANEL_BG)
        tile_container.pack(fill="both", expand=True, padx=8, pady=8)

        for r, row in enumerate(KEYPAD_LAYOUT):
            for c, label in enumerate(row):
                if not label:
                    spacer = tk.Frame(tile_container, bg=PANEL_BG)
                    spacer.grid(row=r, column=c, sticky="nsew", padx=4, pady=4)
                else:
                    btn = tk.Button(tile_container, text=label, relief="flat", fg=FG,
                                    bg=OP_BG if label in OPERATOR_LABELS else BTN_BG,
                                    command=lambda l=label: self._press(l))
                    btn.grid(row=r, column=c, sticky="nsew", padx=4, pady=4)
                    self.buttons[label] = btn
                tile_container.grid_columnconfigure(c, weight=1)
            tile_container.grid_rowconfigure(r, weight=1)

    # -------------------------
    # Input
    # -------------------------
    def _press(self, label: str):
        token = token_for_label(label)
        if token is None:
            logger.warning("No token for keypad label %r", label)
            return
        self._flash(label)
        self._apply(token)

    def _on_key(self, event):
        token = token_for_key(event.keysym, event.char)
        if token is None:
            return None
        self._apply(token)
        return "break"

    def _apply(self, token: Token):
        self.engine.apply(token)
        self._refresh()

    def _copy(self, event=None):
        self.clipboard_clear()
        self.clipboard_append(self.engine.copy_text())
        return "break"

    def _paste(self, event=None):
        try:
            text = self.clipboard_get()
        except tk.TclError:
            # empty clipboard
            return "break"
        if self.engine.load_entry(text):
            self._refresh()
        else:
            self.bell()
        return "break"

    # -------------------------
    # Rendering
    # -------------------------
    def _refresh(self):
        """Repaint everything derived from the engine."""
        state = self.engine.state
        self.display_var.set(state.display)
        self.display_label.config(fg=ERROR_FG if state.has_error else FG)
        self.pending_var.set(self.engine.pending_expression())
        self.memory_label.config(fg=ACCENT if self.engine.memory_indicator_active() else MUTED_FG)
        self._fill_history()

    def _flash(self, label: str):
        """Briefly highlight a pressed tile."""
        btn = self.buttons.get(label)
        if btn is None:
            return
        original = btn.cget("bg")
        btn.config(bg=FLASH_BG)
        self.after(FLASH_MS, lambda: btn.config(bg=original))

    # -------------------------
    # History overlay
    # -------------------------
    def toggle_history(self):
        """Open or close the history overlay window (bottom anchored)."""
        if self.history_window and tk.Toplevel.winfo_exists(self.history_window):
            self._close_history()
            return
        win = tk.Toplevel(self)
        win.title("History")
        win.geometry(f"{self.winfo_width()}x220+{self.winfo_rootx()}+{self.winfo_rooty() + self.winfo_height() - 220}")
        win.transient(self)
        win.protocol("WM_DELETE_WINDOW", self._close_history)
        self.history_window = win

        frm = tk.Frame(win, bg="#0e0f10")
        frm.pack(fill="both", expand=True)
        lb = tk.Listbox(frm, bg="#0e0f10", fg=FG)
        lb.pack(side="left", fill="both", expand=True, padx=6, pady=6)
        self.history_list = lb

        scrollbar = tk.Scrollbar(frm, command=lb.yview)
        lb.config(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")

        tk.Button(win, text="Clear history", bg=BTN_BG, fg=FG, relief="flat",
                  command=self._clear_history).pack(fill="x", padx=6, pady=(0, 6))

        # double-click to reuse a result as the current entry
        lb.bind("<Double-Button-1>", lambda e: self._on_history_double(lb))
        self._fill_history()

    def _fill_history(self):
        if self.history_list is None:
            return
        self.history_list.delete(0, "end")
        for entry in self.engine.history_entries():
            self.history_list.insert("end", entry.expression)
            self.history_list.insert("end", f"  = {entry.result}")

    def _clear_history(self):
        self.engine.history.clear()
        self._fill_history()

    def _close_history(self):
        """Close the history window if open."""
        if self.history_window:
            self.history_window.destroy()
            self.history_window = None
            self.history_list = None

    def _on_history_double(self, listbox: tk.Listbox):
        sel = listbox.curselection()
        if not sel:
            return
        # two listbox rows per entry
        entries = self.engine.history_entries()
        index = sel[0] // 2
        if index < len(entries) and self.engine.load_entry(entries[index].result):
            self._refresh()
