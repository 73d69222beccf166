"""
Configuration & Constants
=========================
This module serves as the central registry for identifiers and tunables of the
demo.

Why is this file needed?
------------------------
1. Abstraction: The settings key, the demo strings and the callback delay are
   used by the model, the views and the tests. They live here once.
2. Overrides: The names of the environment variables that shorten the 20 s
   delay or pick the capture policy for a live demo are defined here; they are
   resolved in weakself.app.settings.

Exports:
    COUNT_KEY (str): Settings key holding the number of live view models.
    DEFAULT_DELAY_MS (int): Delay before the "long request" completes.
    DEFAULT_POLICY (str): Capture policy used when nothing else is chosen.
"""
ORG_ID = "weakself"
APP_ID = "weakself-demo"
VISIBLE_APP_NAME = "WeakSelf"

# QSettings key shared by the container window and the view model hooks
COUNT_KEY: str = "count"

INSTANT_DATA: str = "Instantaneous data for UI testing!"
DELAYED_DATA: str = "New data after long request."

DEFAULT_DELAY_MS: int = 20_000
DEFAULT_POLICY: str = "weak"

ENV_DELAY_MS = "WEAKSELF_DELAY_MS"
ENV_CAPTURE = "WEAKSELF_CAPTURE"
