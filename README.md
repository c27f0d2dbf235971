# redwall

redwall fetches the hot posts of the `wallpaper` subreddit, lets you pick
one, crops and scales the image to the resolution of your primary display
and sets it as the wallpaper on every KDE Plasma desktop. If you don't like
the result, the previous wallpaper can be put back.

## Requirements

- Linux with KDE Plasma 6 (wallpapers are read and set through `qdbus6`)
- `xrandr` on the `PATH`, used to find the size of the primary display
- Python 3.10 or later with Pillow
- Tk support in your Python build for the graphical window

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Graphical window

```
redwall
```

Before the window opens, redwall detects the screen size, then remembers
your current wallpaper and loads the list of posts at the same time. Only
image posts that are not marked NSFW are listed. Errors in these steps are
printed as `Error: ...`; if the screen size cannot be found, the command
exits with status 1.

The images are downloaded in the background once the window is shown.
Click a title in the list on the left to see its image, scaled to fit, on
the right (nothing is shown until that image has been downloaded). Then:

- **Set Wallpaper** scales the selected image to your screen and applies it.
  The scaled JPEG is written to redwall's cache directory
  (`$XDG_CACHE_HOME/redwall`, or `~/.cache/redwall`) as `slot0.jpg` and
  `slot1.jpg` in turn, so Plasma always notices that the file has changed.
- **Undo** restores the wallpaper that was active when redwall started.

Errors from these buttons are printed to the terminal.

## Command line

```
redwall-cli
```

The command prints the detected screen size and a numbered list of posts:

```
Screen size 2560x1440
[0] Misty mountains at dawn - https://i.redd.it/example.jpg
[1] ...
Choose a wallpaper
```

Type the number of a post. The image (JPEG or PNG) is downloaded, cropped
around its centre to the aspect ratio of your screen, scaled with a bicubic
filter and saved as JPEG in the current directory under the name `image`
followed by the extension from the post's URL. It is then set as your
wallpaper and you are asked `Keep new Wallpaper? (yes)`. Answer `yes` to
keep it; any other answer puts the previous wallpaper back.

A number outside the list prints `Post N not found`; this and any other
error (`Error: ...`) end the command with status 1.

## Using it from Python

The pieces work on their own too:

```python
from redwall.reddit import Client
from redwall.scaler import scale
from redwall.screen import Screen
from redwall.kde import KDESetter

screen = Screen.detect()
client = Client()
posts = client.fetch_posts()

data = client.download_image(posts[0].url)
jpeg_bytes = scale(screen.width, screen.height, data)

with open("/tmp/wallpaper.jpg", "wb") as fh:
    fh.write(jpeg_bytes)

setter = KDESetter()
previous = setter.current()
setter.set("/tmp/wallpaper.jpg")
```

- `Client(subreddit="wallpaper", user_agent="redwall/1.0", timeout=None)`
  reads the hot listing of any subreddit. `fetch_posts()` returns `Post`
  objects for image posts that are not marked NSFW; `filter_posts()` applies
  the same rule to a parsed `Listing` or to any iterable of posts.
- `Client.download_image()` raises `DownloadError` when the server answers
  with anything other than 200.
- `redwall.types` holds the frozen dataclasses `Listing`, `Post`, `Preview`,
  `PreviewImage` and `ImageSource`, each with a `from_dict()` that tolerates
  missing fields.
- `crop_box()` gives the centred `(left, top, right, bottom)` region of the
  source image that matches the screen's aspect ratio; `scale()` crops to it
  and returns JPEG bytes. Transparent pixels become black.
- `parse_xrandr()` reads the primary display's resolution from `xrandr`
  output and raises `ScreenError` when there is no primary display.
- `KDESetter.current()` returns the first desktop's wallpaper path;
  `KDESetter.set()` sets an image on all desktops. `set_script()` returns the
  Plasma script used for that.
- `Controller` ties it all together and is what the graphical window drives.

## What redwall does not do

- It sets wallpapers on KDE Plasma only; other desktops are not supported.
- The commands always use the first page of the `wallpaper` subreddit's hot
  listing; there is no option to pick another subreddit or to page further.
- Downloaded images are not kept between runs; only the scaled wallpaper
  files are written.