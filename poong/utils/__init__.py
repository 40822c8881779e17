"""
Poong utility module
"""

from poong.utils.config import GameConfig
from poong.utils.config import game_config
from poong.utils.config import game_config_tmp

__all__ = ["game_config", "game_config_tmp", "GameConfig"]
