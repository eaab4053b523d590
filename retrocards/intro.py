"""Chapter two intro: an IRC chat story told with typed text, sprites and a scan animation."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterable, Iterator, NamedTuple, Optional, Sequence, Union

from retrocards import sprite_data
from retrocards.screen import Color, Screen
from retrocards.sprite import (
    SPRITE_CURSOR,
    SPRITE_DATA_BASE,
    SPRITE_DATA_SIZE,
    SPRITE_FTP,
    SPRITE_LEWIS,
    Vic,
)

TYPING_DELAY = 3
WALK_SPEED = 2
BLINK_CYCLE = 30
SPINNER_SPEED = 8
SLIDE_SPEED = 1
FRAME_DELAY = 1 / 60

SINE_TABLE_SIZE = 32
SCAN_AREA_X = 2
SCAN_AREA_Y = 7
SCAN_AREA_W = 28
SCAN_AREA_H = 8
SCAN_FRAMES = 240

MAX_NICK_LENGTH = 12
MAX_TYPED_LENGTH = 40

SINE_TABLE: tuple[int, ...] = (
    4, 5, 6, 6, 7, 7, 7, 6,
    6, 5, 4, 3, 2, 1, 1, 0,
    0, 0, 1, 1, 2, 3, 4, 5,
    6, 6, 7, 7, 7, 6, 6, 5,
)

CHANNEL = "#DEWDZKI-FXP"
PRESS_ANY_KEY = "PRESS ANY KEY"

_NICK_COLORS = {
    "LEWIS": Color.YELLOW,
    "SICK0": Color.RED,
    "FERRE070": Color.GREEN,
    "ZZZ": Color.GRAY2,
    "AXE": Color.CYAN,
    "DARKPH4NT": Color.LIGHTRED,
    "YOU": Color.WHITE,
}
_MESSAGE_COLORS = {"YOU": Color.LIGHTBLUE}

_SCAN_RESULTS = {
    60: (17, "192.168.1.44  - TIMEOUT"),
    100: (18, "192.168.3.17  - CLOSED"),
    140: (19, "192.168.5.102 - CLOSED"),
    180: (20, "192.168.12.55 - TIMEOUT"),
}


class _Chat(NamedTuple):
    y: int
    nick: str
    message: str
    pause: int = 0


class _Notice(NamedTuple):
    y: int
    text: str
    color: int
    pause: int = 0


_Step = Union[_Chat, _Notice]

_SCENE_CHAT: tuple[_Step, ...] = (
    _Chat(3, "LEWIS", "ANOTHER DAY ANOTHER SCAN...", 20),
    _Chat(4, "SICK0", "PUB FTPS ARE DRY AF LATELY", 20),
    _Chat(5, "FERRE070", "MAYBE WE SHOULD TRY FISHING", 15),
    _Chat(6, "ZZZ", "ARROWS", 15),
    _Chat(7, "LEWIS", "EVERYONE SCANNING THE SAME"),
    _Chat(8, "LEWIS", "RANGES... WE NEED SOMETHING NEW", 30),
    _Chat(10, "AXE", "I MIGHT HAVE AN IDEA...", 40),
)

_SCENE_DISS: tuple[_Step, ...] = (
    _Notice(3, "*** DARKPH4NT HAS JOINED", Color.GREEN, 30),
    _Chat(5, "DARKPH4NT", "LMAO STILL SCANNING PUBS?", 20),
    _Chat(6, "DARKPH4NT", "ROSEVALLEY-FXP MOVED TO SMB"),
    _Chat(7, "DARKPH4NT", "MONTHS AGO. YOU GUYS ARE DONE", 20),
    _Chat(9, "SICK0", "WTF IS SMB?", 15),
    _Chat(10, "DARKPH4NT", "LOL EXACTLY. STAY IN THE"),
    _Chat(11, "DARKPH4NT", "KIDDIE POOL NOOBS", 15),
    _Notice(13, "*** DARKPH4NT HAS LEFT", Color.RED, 20),
    _Chat(15, "LEWIS", "..."),
    _Chat(16, "FERRE070", "THAT GUY IS SUCH A TOOL", 15),
    _Chat(18, "AXE", "HE'S NOT WRONG THOUGH"),
    _Chat(19, "AXE", "WE NEED TO LEVEL UP"),
)

_SCENE_SMB: tuple[_Step, ...] = (
    _Chat(4, "AXE", "SMB = SERVER MESSAGE BLOCK", 20),
    _Chat(5, "AXE", "WINDOWS FILE SHARING ON"),
    _Chat(6, "AXE", "PORT 139. MOST BOXES HAVE"),
    _Chat(7, "AXE", "NO PASSWORD OR ADMIN/ADMIN", 20),
    _Chat(9, "LEWIS", "SO WE CAN ACCESS THEIR"),
    _Chat(10, "LEWIS", "HARD DRIVES REMOTELY?", 15),
    _Chat(12, "AXE", "EXACTLY. SCAN FOR PORT 139"),
    _Chat(13, "AXE", "FIND OPEN SHARES, USE THEM"),
    _Chat(14, "AXE", "AS DUMP SITES FOR RELEASES", 15),
    _Chat(16, "LEWIS", "LETS DO IT"),
)

_SCENE_FORUM: tuple[_Step, ...] = (
    _Chat(3, "AXE", "THERE'S MORE. YOU KNOW THE"),
    _Chat(4, "AXE", "UNDERGROUND FORUM?", 20),
    _Chat(6, "LEWIS", "HEARD OF IT. NEVER BEEN", 15),
    _Chat(8, "AXE", "THE GOOD TOOLS ARE THERE."),
    _Chat(9, "AXE", "SCANNERS, EXPLOITS, CONFIGS"),
    _Chat(10, "AXE", "BUT EVERYTHING IS GATED BY"),
    _Chat(11, "AXE", "REPUTATION POINTS", 20),
    _Chat(13, "SICK0", "HOW DO WE GET REP?", 15),
    _Chat(15, "AXE", "CONTRIBUTE. SHARE CONFIGS,"),
    _Chat(16, "AXE", "POST WORKING SCANS, HELP"),
    _Chat(17, "AXE", "OTHERS. THE MORE YOU GIVE"),
    _Chat(18, "AXE", "THE MORE ACCESS YOU GET"),
)

_SCENE_WARNING: tuple[_Step, ...] = (
    _Chat(3, "LEWIS", "ONE THING THOUGH...", 20),
    _Chat(5, "LEWIS", "SMB BOXES HAVE ADMINS."),
    _Chat(6, "LEWIS", "THEY CHECK LOGS. IF THEY"),
    _Chat(7, "LEWIS", "FIND OUR STUFF WE LOSE"),
    _Chat(8, "LEWIS", "THE BOX", 20),
    _Chat(10, "AXE", "THATS WHY WE HIDE FILES IN"),
    _Chat(11, "AXE", "DEEP FOLDERS. NAMES LIKE"),
    _Chat(12, "AXE", "SYSTEM32\\DRIVERS\\ETC", 20),
    _Chat(14, "LEWIS", "AND IF THEY PATCH IT?", 15),
    _Chat(16, "AXE", "THEN WE FIND NEW BOXES."),
    _Chat(17, "AXE", "THERE ARE MILLIONS OUT THERE"),
)

_SCENE_RALLY: tuple[_Step, ...] = (
    _Chat(3, "LEWIS", "ALRIGHT CREW. NEW ERA."),
    _Chat(4, "LEWIS", "WE'RE GOING SMB", 20),
    _Chat(6, "SICK0", "HELL YEAH LETS WRECK IT", 15),
    _Chat(7, "FERRE070", "DARKPH4NT CAN KISS MY ASS", 15),
    _Chat(8, "ZZZ", "ARROWS", 15),
    _Chat(10, "AXE", "ILL SET EVERYONE UP WITH"),
    _Chat(11, "AXE", "THE TOOLS. LETS DO THIS", 20),
    _Chat(13, "YOU", "WHAT DO I DO?", 15),
    _Chat(15, "LEWIS", "YOU? YOU'RE GONNA RUN"),
    _Chat(16, "LEWIS", "THE WHOLE OPERATION.", 40),
)


def slide_positions(
    start_x: int, start_y: int, end_x: int, end_y: int, frames: int
) -> Iterator[tuple[int, int]]:
    """Positions of a slide, one per frame; the end point itself is never reached."""
    for i in range(frames):
        if start_x <= end_x:
            x = start_x + (end_x - start_x) * i // frames
        else:
            x = start_x - (start_x - end_x) * i // frames
        if start_y <= end_y:
            y = start_y + (end_y - start_y) * i // frames
        else:
            y = start_y - (start_y - end_y) * i // frames
        yield x, y


def irc_prefix(nick: str) -> str:
    """The ``<NICK> `` text shown before a chat message."""
    if len(nick) > MAX_NICK_LENGTH:
        raise ValueError(f"nick {nick!r} is longer than {MAX_NICK_LENGTH} characters")
    return f"<{nick}> "


def _terminal_keys(screen: Screen) -> Iterator[Optional[str]]:
    while True:
        sys.stdout.write(screen.render() + "\n> ")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            return
        yield line.strip()[:1] or "\r"


def _is_quit(key: str) -> bool:
    return key in ("q", "Q")


class Intro:
    """Plays the intro scenes on a screen and sprite chip.

    ``keys`` yields one key per poll, or None when no key is pressed; when
    it runs out, polling raises EOFError. Without ``keys`` the screen is
    printed to standard output and each input line is one key press.
    """

    def __init__(
        self,
        screen: Optional[Screen] = None,
        vic: Optional[Vic] = None,
        keys: Optional[Iterable[Optional[str]]] = None,
        frame_delay: float = FRAME_DELAY,
    ) -> None:
        self.screen = screen if screen is not None else Screen()
        self.vic = vic if vic is not None else Vic()
        self._keys: Iterator[Optional[str]] = (
            iter(keys) if keys is not None else _terminal_keys(self.screen)
        )
        self.frame_delay = frame_delay
        self.frames_elapsed = 0

    # ----- timing and input -----

    def _vsync(self) -> None:
        self.frames_elapsed += 1
        if self.frame_delay > 0:
            time.sleep(self.frame_delay)

    def wait_frames(self, count: int) -> None:
        """Wait ``count`` display frames."""
        for _ in range(count):
            self._vsync()

    def _poll_key(self) -> Optional[str]:
        try:
            return next(self._keys)
        except StopIteration:
            raise EOFError("no more key input") from None

    def _wait_for_key_or_quit(self) -> bool:
        while True:
            key = self._poll_key()
            if key is not None:
                return _is_quit(key)

    def _blink_until_key(self, y: int, text: str) -> bool:
        blank = " " * len(text)
        frame = 0
        while True:
            key = self._poll_key()
            if key is not None:
                return _is_quit(key)
            if frame % BLINK_CYCLE < BLINK_CYCLE // 2:
                self.screen.print_centered(y, text, Color.YELLOW)
            else:
                self.screen.print_centered(y, blank, Color.BLACK)
            self._vsync()
            frame = (frame + 1) & 0xFF

    # ----- drawing helpers -----

    def slide_sprite(
        self, sprite_num: int, start_x: int, start_y: int, end_x: int, end_y: int, frames: int
    ) -> None:
        """Move a sprite smoothly towards a point, one step per frame."""
        for x, y in slide_positions(start_x, start_y, end_x, end_y, frames):
            self.vic.set_position(sprite_num, x, y)
            self.vic.enable(sprite_num, True)
            self.wait_frames(SLIDE_SPEED)

    def _type_text(self, x: int, y: int, text: str, color: int) -> None:
        text = text[:MAX_TYPED_LENGTH]
        for end in range(1, len(text) + 1):
            self.screen.print_string(x, y, text[:end], color)
            self.wait_frames(TYPING_DELAY)

    def _type_irc_line(self, y: int, nick: str, message: str) -> None:
        prefix = irc_prefix(nick)
        self.screen.print_string(1, y, prefix, _NICK_COLORS.get(nick, Color.WHITE))
        self._type_text(1 + len(prefix), y, message, _MESSAGE_COLORS.get(nick, Color.WHITE))

    def _play(self, steps: Iterable[_Step]) -> None:
        for step in steps:
            if isinstance(step, _Notice):
                self.screen.print_string(1, step.y, step.text, step.color)
            else:
                self._type_irc_line(step.y, step.nick, step.message)
            self.wait_frames(step.pause)

    def _channel_header(self) -> None:
        self.screen.print_string(1, 0, CHANNEL, Color.YELLOW)
        self.screen.hline(1, 1, 38, "-", Color.GRAY2)

    def _show_lewis(self, y: int) -> None:
        vic = self.vic
        vic.set_multicolor_shared(10, 0)
        vic.set_multicolor(SPRITE_LEWIS, True)
        vic.load(SPRITE_LEWIS, sprite_data.SPRITE_LEWIS, SPRITE_DATA_BASE + SPRITE_DATA_SIZE)
        vic.set_color(SPRITE_LEWIS, 6)
        vic.set_position(SPRITE_LEWIS, 40, y)
        vic.enable(SPRITE_LEWIS, True)

    def _prompt(self) -> bool:
        self.screen.print_centered(23, PRESS_ANY_KEY, Color.YELLOW)
        return self._wait_for_key_or_quit()

    # ----- scenes -----

    def _scene_chat(self) -> bool:
        self.screen.clear()
        self._channel_header()
        self._play(_SCENE_CHAT)
        return False

    def _scene_diss(self) -> bool:
        self.screen.clear()
        self._channel_header()
        self._play(_SCENE_DISS)
        return self._prompt()

    def _scene_smb(self) -> bool:
        self.screen.clear()
        self._show_lewis(60)

        self.vic.set_multicolor(SPRITE_FTP, True)
        self.vic.load(SPRITE_FTP, sprite_data.SPRITE_AXE, SPRITE_DATA_BASE + SPRITE_DATA_SIZE * 2)
        self.vic.set_color(SPRITE_FTP, 3)
        self.slide_sprite(SPRITE_FTP, 320, 60, 280, 60, 20)

        self.screen.print_string(8, 1, "PRIVATE LESSON", Color.CYAN)
        self.screen.hline(8, 2, 14, "-", Color.GRAY2)
        self._play(_SCENE_SMB)

        quit_requested = self._prompt()
        self.vic.enable(SPRITE_LEWIS, False)
        self.vic.enable(SPRITE_FTP, False)
        return quit_requested

    def _scene_scan(self) -> bool:
        screen = self.screen
        vic = self.vic
        screen.clear()
        screen.print_string(1, 0, "SMB SCANNER v1.0", Color.CYAN)
        screen.hline(1, 1, 38, "-", Color.GRAY2)
        screen.print_string(1, 2, "SCANNING PORT 139...", Color.WHITE)
        screen.print_string(1, 3, "RANGE: 192.168.0.0/16", Color.GRAY2)
        screen.box(SCAN_AREA_X - 1, SCAN_AREA_Y - 1, SCAN_AREA_W + 2, SCAN_AREA_H + 2, Color.GRAY2)

        vic.set_multicolor(SPRITE_CURSOR, False)
        vic.set_color(SPRITE_CURSOR, Color.YELLOW)
        vic.set_position(SPRITE_CURSOR, 290, 50)
        vic.enable(SPRITE_CURSOR, True)

        previous: list[Optional[int]] = [None] * SCAN_AREA_W
        phase = 0
        for frame in range(SCAN_FRAMES):
            if frame % SPINNER_SPEED == 0:
                spinner = sprite_data.SPINNER_FRAMES[(frame // SPINNER_SPEED) % 4]
                vic.load(SPRITE_CURSOR, spinner, SPRITE_DATA_BASE)

            for x in range(SCAN_AREA_W):
                old = previous[x]
                if old is not None:
                    screen.set_char(SCAN_AREA_X + x, SCAN_AREA_Y + old, " ", Color.BLACK)
                wave = min(SINE_TABLE[(phase + x) % SINE_TABLE_SIZE], SCAN_AREA_H - 1)
                screen.set_char(SCAN_AREA_X + x, SCAN_AREA_Y + wave, "*", Color.CYAN)
                previous[x] = wave

            phase = (phase + 1) % SINE_TABLE_SIZE

            result = _SCAN_RESULTS.get(frame)
            if result is not None:
                row, text = result
                screen.print_string(1, row, text, Color.GRAY2)

            self._vsync()

        vic.enable(SPRITE_CURSOR, False)
        screen.print_string(1, 22, "*** OPEN SHARE FOUND! ***", Color.GREEN)
        screen.print_string(1, 23, "192.168.14.201:139 C$ WRITABLE", Color.YELLOW)
        return self._blink_until_key(24, PRESS_ANY_KEY)

    def _scene_forum(self) -> bool:
        self.screen.clear()
        self._channel_header()
        self._play(_SCENE_FORUM)
        return self._prompt()

    def _scene_warning(self) -> bool:
        self.screen.clear()
        self._show_lewis(50)
        self._channel_header()
        self._play(_SCENE_WARNING)
        quit_requested = self._prompt()
        self.vic.enable(SPRITE_LEWIS, False)
        return quit_requested

    def _scene_rally(self) -> bool:
        self.screen.clear()
        self._channel_header()
        self._play(_SCENE_RALLY)
        return False

    def _scene_title(self) -> bool:
        screen = self.screen
        screen.clear()
        self.wait_frames(30)
        screen.print_centered(8, "- - - - - - - - - - -", Color.GRAY2)
        self.wait_frames(15)
        screen.print_centered(10, "CHAPTER 2", Color.CYAN)
        self.wait_frames(20)
        screen.print_centered(12, "THE RISE", Color.WHITE)
        self.wait_frames(15)
        screen.print_centered(14, "- - - - - - - - - - -", Color.GRAY2)
        self.wait_frames(30)
        return self._blink_until_key(20, "PRESS ANY KEY TO BEGIN")

    # ----- sequence -----

    def _init(self) -> None:
        self.screen.background = Color.BLACK
        self.screen.border = Color.BLUE
        self.screen.clear()
        self.vic.reset()

    def run(self) -> bool:
        """Play every scene in order; True if the viewer quit with Q."""
        self._init()
        scenes = (
            self._scene_chat,
            self._scene_diss,
            self._scene_smb,
            self._scene_scan,
            self._scene_forum,
            self._scene_warning,
            self._scene_rally,
            self._scene_title,
        )
        for scene in scenes:
            if scene():
                return True
        return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the chapter two intro in the terminal."""
    parser = argparse.ArgumentParser(prog="retrocards-intro", description="Chapter two intro.")
    parser.add_argument("--fast", action="store_true", help="do not wait between frames")
    args = parser.parse_args(argv)

    intro = Intro(frame_delay=0 if args.fast else FRAME_DELAY)
    try:
        intro.run()
    except (EOFError, KeyboardInterrupt):
        pass
    print(intro.screen.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())