"""Scene names, audio settings and menu navigation between the game's scenes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from towerdefense.slider import Slider

SCREEN_WIDTH = 1600
SCREEN_HEIGHT = 832
FPS = 60
STAGES = (1, 2)

_HALF_W = SCREEN_WIDTH // 2
_HALF_H = SCREEN_HEIGHT // 2
_SLIDER_X = 40 + _HALF_W - 95
_SLIDER_WIDTH = 190
_SLIDER_HEIGHT = 4
_BGM_SLIDER_Y = _HALF_H - 50 - 2
_SFX_SLIDER_Y = _HALF_H + 50 - 2


class SceneName(Enum):
    """Names under which the scenes are registered."""

    START = "start"
    SCOREBOARD = "scoreboard"
    STAGE_SELECT = "stage-select"
    SETTINGS = "settings"
    PLAY = "play"
    LOSE = "lose"
    WIN = "win"


START_SCENE = SceneName.START

# Background music each scene starts when it is entered.
SCENE_MUSIC: dict[SceneName, str | None] = {
    SceneName.START: None,
    SceneName.SCOREBOARD: "select.ogg",
    SceneName.STAGE_SELECT: "select.ogg",
    SceneName.SETTINGS: "select.ogg",
    SceneName.PLAY: "play.ogg",
    SceneName.LOSE: "astronomia.ogg",
    SceneName.WIN: "win.wav",
}

# Buttons that lead to another scene, by the scene they are shown on.
_TRANSITIONS: dict[SceneName, dict[str, SceneName]] = {
    SceneName.START: {
        "play": SceneName.STAGE_SELECT,
        "settings": SceneName.SETTINGS,
    },
    SceneName.STAGE_SELECT: {
        "back": SceneName.START,
        "scoreboard": SceneName.SCOREBOARD,
    },
    SceneName.SETTINGS: {"back": SceneName.START},
    SceneName.LOSE: {"back": SceneName.STAGE_SELECT},
    SceneName.WIN: {
        "back": SceneName.STAGE_SELECT,
        "submit": SceneName.SCOREBOARD,
    },
    SceneName.SCOREBOARD: {
        "back": SceneName.STAGE_SELECT,
        "prev": SceneName.SCOREBOARD,
        "next": SceneName.SCOREBOARD,
    },
    SceneName.PLAY: {},
}

_STAGE_BUTTONS = {f"stage {stage}": stage for stage in STAGES}


@dataclass
class Settings:
    """Volumes of background music and sound effects, from 0 to 1."""

    bgm_volume: float = 1.0
    sfx_volume: float = 1.0


class Navigator:
    """Tracks the active scene and reacts to the menu buttons."""

    def __init__(self) -> None:
        self.settings = Settings()
        self.map_id: int | None = None
        self.sliders: dict[str, Slider] = {}
        self.current = START_SCENE
        self._enter(START_SCENE)

    @property
    def music(self) -> str | None:
        """Background music of the active scene."""
        return SCENE_MUSIC[self.current]

    def _enter(self, scene: SceneName) -> SceneName:
        self.current = scene
        self.sliders = {}
        if scene is SceneName.SETTINGS:
            self.sliders = {
                "bgm": Slider(_SLIDER_X, _BGM_SLIDER_Y, _SLIDER_WIDTH, _SLIDER_HEIGHT,
                              self._set_bgm),
                "sfx": Slider(_SLIDER_X, _SFX_SLIDER_Y, _SLIDER_WIDTH, _SLIDER_HEIGHT,
                              self._set_sfx),
            }
            self.sliders["bgm"].set_value(self.settings.bgm_volume)
            self.sliders["sfx"].set_value(self.settings.sfx_volume)
        return scene

    def _set_bgm(self, value: float) -> None:
        self.settings.bgm_volume = value

    def _set_sfx(self, value: float) -> None:
        self.settings.sfx_volume = value

    def click(self, button: str) -> SceneName:
        """Press the button labelled `button` on the active scene."""
        label = button.strip().lower()
        if self.current is SceneName.STAGE_SELECT and label in _STAGE_BUTTONS:
            return self.select_stage(_STAGE_BUTTONS[label])
        target = _TRANSITIONS[self.current].get(label)
        if target is None:
            raise ValueError(f"no button {button!r} on scene {self.current.value!r}")
        if target is self.current:
            return self.current
        return self._enter(target)

    def select_stage(self, stage: int) -> SceneName:
        """Start stage `stage` from the stage selection."""
        if self.current is not SceneName.STAGE_SELECT:
            raise ValueError("stages are chosen on the stage selection scene")
        if stage not in STAGES:
            raise ValueError(f"unknown stage {stage!r}")
        self.map_id = stage
        return self._enter(SceneName.PLAY)

    def change_volume(self, channel: str, value: float) -> Settings:
        """Move the 'bgm' or 'sfx' slider of the settings scene to `value`."""
        if self.current is not SceneName.SETTINGS:
            raise ValueError("volumes are changed on the settings scene")
        slider = self.sliders.get(channel.strip().lower())
        if slider is None:
            raise ValueError(f"unknown volume channel {channel!r}")
        slider.set_value(value)
        return self.settings