"""Desktop window for browsing posts and setting one as wallpaper."""

from __future__ import annotations

import argparse
import subprocess
import threading
from concurrent.futures import ThreadPoolExecutor

from redwall.controller import Controller
from redwall.kde import KDESetter
from redwall.reddit import Client, DownloadError
from redwall.screen import Screen, ScreenError

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
SPLIT_OFFSET = 0.3

_ERRORS = (OSError, ValueError, subprocess.SubprocessError, ScreenError, DownloadError)


def prepare(controller) -> list[BaseException]:
    """Save the current wallpaper and load the posts concurrently; return the errors."""
    with ThreadPoolExecutor(max_workers=2) as pool:
        futures = [pool.submit(controller.save_previous), pool.submit(controller.load_posts)]
    return [f.exception() for f in futures if f.exception() is not None]


def _report(action) -> None:
    try:
        action()
    except _ERRORS as err:
        print("Error:", err)


class WallpaperWindow:
    """Post list on the left, preview and buttons on the right."""

    def __init__(self, root, controller) -> None:
        import tkinter as tk

        self.root = root
        self.controller = controller
        self._photo = None

        paned = tk.PanedWindow(root, orient=tk.HORIZONTAL)
        paned.pack(fill=tk.BOTH, expand=True)
        self.listbox = tk.Listbox(paned, exportselection=False)
        for post in controller.posts:
            self.listbox.insert(tk.END, post.title)
        self.listbox.bind("<<ListboxSelect>>", self.on_select)

        right = tk.Frame(paned)
        buttons = tk.Frame(right)
        buttons.pack(side=tk.BOTTOM, fill=tk.X)
        tk.Button(buttons, text="Set Wallpaper", command=self.on_set).pack(side=tk.LEFT)
        tk.Button(buttons, text="Undo", command=self.on_undo).pack(side=tk.LEFT)
        self.preview = tk.Label(right)
        self.preview.pack(fill=tk.BOTH, expand=True)

        paned.add(self.listbox, width=int(WINDOW_WIDTH * SPLIT_OFFSET))
        paned.add(right)

    def on_select(self, event) -> None:
        """Show the selected post's image, scaled to fit the preview."""
        from PIL import ImageOps, ImageTk

        selection = self.listbox.curselection()
        image = self.controller.select_post(selection[0]) if selection else None
        if image is None:
            return
        if image.mode not in ("RGB", "RGBA"):
            image = image.convert("RGBA")
        size = (self.preview.winfo_width(), self.preview.winfo_height())
        if min(size) <= 1:
            size = (int(WINDOW_WIDTH * (1 - SPLIT_OFFSET)), WINDOW_HEIGHT)
        self._photo = ImageTk.PhotoImage(ImageOps.contain(image, size))
        self.preview.configure(image=self._photo)

    def on_set(self) -> None:
        """Set the selected image as wallpaper."""
        _report(self.controller.set_wallpaper)

    def on_undo(self) -> None:
        """Restore the wallpaper that was set when the window opened."""
        _report(self.controller.undo)


def main(argv: list[str] | None = None) -> int:
    """Open the wallpaper picker window."""
    argparse.ArgumentParser(
        prog="redwall-gui", description="Browse wallpaper posts and set one on KDE Plasma."
    ).parse_args(argv)
    try:
        controller = Controller(Client(), KDESetter(), Screen.detect())
    except _ERRORS as err:
        print("Error:", err)
        return 1
    for err in prepare(controller):
        print("Error:", err)

    import tkinter as tk

    root = tk.Tk()
    root.title("redwall")
    root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
    WallpaperWindow(root, controller)
    threading.Thread(
        target=_report, args=(controller.download_images,), daemon=True
    ).start()
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())