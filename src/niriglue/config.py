"""niriglue configuration

Groups:
- Layout heuristics: width floor, pixel approximation, column padding
- Editor: app id, launch command, RPC socket template
- Terminal: kitty app id, command, remote-control socket template
- niri: socket discovery
- Logging / metrics
"""

import os

# === Layout heuristics ===
MIN_TEXTWIDTH = 80  # floor/fallback content width of a column (symbols)
PIXELS_PER_SYMBOL = 8.0093  # approximate glyph advance of the editor font
COLUMN_WIDTH_KOEFF = 1.2  # desired column width = koeff * textwidth
SEPARATOR_WIDTH = 1  # vertical separator left of a pane (symbols)

# === Editor ===
EDITOR_APP_ID = "neovide"  # niri app_id of the editor frame
EDITOR_COMMAND = ["neovide"]  # command used by `vim run`
NVIM_SOCKET_TEMPLATE = "/run/user/{uid}/nvim.{pid}.0"  # nvim --listen default

# === Terminal ===
KITTY_APP_ID = "kitty"  # niri app_id of kitty windows
KITTY_COMMAND = "kitty"  # binary used for remote control and `kitty` launches
KITTY_SOCKET_TEMPLATE = "{runtime_dir}/kitty-{pid}"  # listen_on unix:${XDG_RUNTIME_DIR}/kitty-{kitty_pid}

# === niri ===
NIRI_SOCKET_ENV = "NIRI_SOCKET"
SOCKET_TIMEOUT = 5.0  # seconds per IPC round-trip

# === Logging ===
LOG_LEVEL = os.environ.get("NIRIGLUE_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"

# === Metrics ===
METRICS_ENABLED = True
