"""Read and set the KDE Plasma desktop wallpaper through qdbus."""

from __future__ import annotations

import subprocess

QDBUS = "qdbus6"
_SERVICE = ("org.kde.plasmashell", "/PlasmaShell", "org.kde.PlasmaShell.evaluateScript")

_PLUGIN = "org.kde.image"
_CONFIG_GROUP = f'["Wallpaper", "{_PLUGIN}", "General"]'
_IMAGE_KEY = '"Image"'


def _script(*lines: str) -> str:
    return "\n".join(lines) + "\n"


CURRENT_SCRIPT = _script(
    "const first = desktops()[0];",
    f"first.currentConfigGroup = {_CONFIG_GROUP};",
    f"print(first.readConfig({_IMAGE_KEY}));",
)


def set_script(image_path: str) -> str:
    """Return the Plasma script that sets ``image_path`` on every desktop."""
    return _script(
        "for (const desktop of desktops()) {",
        f'    desktop.wallpaperPlugin = "{_PLUGIN}";',
        f"    desktop.currentConfigGroup = {_CONFIG_GROUP};",
        f'    desktop.writeConfig({_IMAGE_KEY}, "file://{image_path}");',
        "}",
    )


def _command(script: str) -> list[str]:
    return [QDBUS, *_SERVICE, script]


class KDESetter:
    """Wallpaper setter for KDE Plasma."""

    def current(self) -> str:
        """Return the path of the first desktop's wallpaper image."""
        result = subprocess.run(
            _command(CURRENT_SCRIPT), capture_output=True, text=True, check=True
        )
        return result.stdout.strip().removeprefix("file://")

    def set(self, image_path: str) -> None:
        """Set ``image_path`` as wallpaper on all desktops."""
        subprocess.run(_command(set_script(image_path)), check=True)