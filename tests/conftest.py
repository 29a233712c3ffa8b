"""Global test fixtures."""

import os

import logfire

# Keep Config() away from the user's home directory. This must happen at
# module load time, before any test module builds a Config.
os.environ.setdefault("MVCMOVIE_DATABASE__URL", "sqlite+aiosqlite://")

logfire.configure(send_to_logfire=False, console=False)
