"""Page providers for board extraction.

StaticBoardPage reads already-rendered HTML. PlaywrightBoardPage lives in
retro_export.driver.playwright_page and is imported on demand so that working
with saved pages does not require a browser install.
"""

from retro_export.driver.base import BoardPage
from retro_export.driver.static_page import StaticBoardPage

__all__ = ["BoardPage", "StaticBoardPage"]
