"""Game flow for the card battler: title, menu, runs, combat and rewards."""

from __future__ import annotations

import argparse
from enum import IntEnum
from typing import Callable, Optional, Sequence

from retrocards import cards, encounter
from retrocards.combat import Combat, CombatState
from retrocards.enemy import enemy_name
from retrocards.music import MusicPlayer, TrackId
from retrocards.persistence import (
    SAVE_FILE_NAME,
    PathType,
    SaveError,
    load_game,
    save_game,
)
from retrocards.player import Player
from retrocards.rng import Lcg
from retrocards.screen import Color
from retrocards.ui import Console

REWARD_CHOICES = 3
REWARD_CARD_POOL = 10


class GameState(IntEnum):
    TITLE = 0
    MENU = 1
    RUN_START = 2
    ENCOUNTER = 3
    COMBAT = 4
    VICTORY = 5
    REWARD = 6
    DEFEAT = 7
    WIN = 8
    UNLOCKS = 9
    QUIT = 10


class Game:
    """The screen-to-screen state machine that drives a play session."""

    def __init__(
        self,
        console: Optional[Console] = None,
        music: Optional[MusicPlayer] = None,
        rng: Optional[Lcg] = None,
        save_path: PathType = SAVE_FILE_NAME,
    ) -> None:
        self.console = console if console is not None else Console()
        self.music = music if music is not None else MusicPlayer()
        self.rng = rng if rng is not None else Lcg()
        self.save_path = save_path
        self.player = Player()
        self.state = GameState.TITLE
        # Music keeps playing while the game waits for a key.
        self.console.on_idle = self.music.update
        self._handlers: dict[GameState, Callable[[], None]] = {
            GameState.TITLE: self._title,
            GameState.MENU: self._menu,
            GameState.RUN_START: self._run_start,
            GameState.ENCOUNTER: self._encounter,
            GameState.COMBAT: self._combat,
            GameState.VICTORY: self._victory,
            GameState.REWARD: self._reward,
            GameState.DEFEAT: self._defeat,
            GameState.WIN: self._win,
            GameState.UNLOCKS: self._unlocks,
        }

    def update(self) -> None:
        """Run the handler of the current state once."""
        handler = self._handlers.get(self.state)
        if handler is not None:
            handler()

    def run(self) -> None:
        """Load the save, play until the player quits, then save."""
        self._load()
        while self.state != GameState.QUIT:
            self.music.update()
            self.update()
        self._save()
        self.console.clear()
        self.console.print_at(10, 12, "Thanks for playing!")

    def _load(self) -> bool:
        try:
            load_game(self.player, self.save_path)
        except SaveError:
            return False
        return True

    def _save(self) -> bool:
        try:
            save_game(self.player, self.save_path)
        except SaveError:
            return False
        return True

    def _title(self) -> None:
        console = self.console
        console.clear()
        self.music.play(TrackId.MENU)
        console.print_at_color(8, 5, "C64 CARD BATTLER", Color.YELLOW)
        console.print_at_color(12, 7, "ROGUELIKE", Color.CYAN)
        console.print_at(10, 15, "Press any key...")
        console.wait_key()
        self.state = GameState.MENU

    def _menu(self) -> None:
        console = self.console
        console.clear()
        console.print_at_color(13, 5, "MAIN MENU", Color.YELLOW)
        console.print_at(12, 10, "[N] New Run")
        console.print_at(12, 12, "[Q] Quit")
        while True:
            self.music.update()
            key = console.get_key()
            if key in ("n", "N"):
                self.state = GameState.RUN_START
                return
            if key in ("q", "Q"):
                self.state = GameState.QUIT
                return

    def _run_start(self) -> None:
        console = self.console
        console.clear()
        self.music.stop()
        console.print_at_color(10, 10, "Starting Run...", Color.GREEN)
        console.print_at(10, 12, "Init player...")
        self.player.start_run()
        console.print_at(10, 13, "Init encounter...")
        encounter.start(self.player)
        console.print_at(10, 15, "Press any key")
        console.wait_key()
        self.state = GameState.ENCOUNTER

    def _encounter(self) -> None:
        console = self.console
        console.clear()
        console.print_at_color(10, 10, "Encounter ", Color.YELLOW)
        console.print_number(20, 10, self.player.run_progress + 1)
        console.print_at(22, 10, "/5")
        enemy_id = encounter.enemy_for_floor(self.player.run_progress, self.rng)
        console.print_at(12, 12, "A ")
        console.print_at_color(14, 12, enemy_name(enemy_id), Color.RED)
        console.print_at(14 + 20, 12, " appears!")
        console.wait_key()
        self.state = GameState.COMBAT

    def _combat(self) -> None:
        enemy_id = encounter.enemy_for_floor(self.player.run_progress, self.rng)
        combat = Combat(self.player, enemy_id, self.rng, self.console)
        self.music.play(TrackId.COMBAT)
        while combat.state == CombatState.PLAYER_TURN:
            combat.run()
        if combat.state == CombatState.VICTORY:
            self.state = GameState.VICTORY
        else:
            self.state = GameState.DEFEAT

    def _victory(self) -> None:
        console = self.console
        console.clear()
        console.print_at_color(13, 12, "Victory!", Color.GREEN)
        encounter.victory_rewards(self.player)
        console.wait_key()
        encounter.advance(self.player)
        if encounter.is_run_complete(self.player):
            self.player.total_wins = (self.player.total_wins + 1) & 0xFF
            self._save()
            self.state = GameState.WIN
        else:
            self.state = GameState.REWARD

    def _reward(self) -> None:
        console = self.console
        console.clear()
        console.print_at_color(12, 2, "Choose a Reward!", Color.YELLOW)
        console.print_at(2, 4, "Healed 10 HP!")

        choices = [self.rng.range(0, REWARD_CARD_POOL) for _ in range(REWARD_CHOICES)]

        console.print_at(2, 7, "Choose a card to add:")
        for i, card_id in enumerate(choices):
            row = 9 + i * 2
            console.print_at(4, row, "[")
            console.print_number(5, row, i + 1)
            console.print_at(6, row, "] ")
            console.print_at_color(8, row, cards.card_name(card_id), Color.CYAN)
        console.print_at(2, 16, "[4] Skip card")

        while True:
            key = console.get_key()
            if key is not None and len(key) == 1 and "1" <= key <= "3":
                self.player.add_card(choices[ord(key) - ord("1")])
                break
            if key == "4":
                break
        self.state = GameState.ENCOUNTER

    def _defeat(self) -> None:
        self.console.clear()
        self.console.print_at_color(10, 12, "You were defeated!", Color.RED)
        self.console.wait_key()
        self.music.play(TrackId.MENU)
        self.state = GameState.MENU

    def _win(self) -> None:
        self.console.clear()
        self.console.print_at_color(8, 12, "You won the run!", Color.YELLOW)
        self.console.wait_key()
        self.state = GameState.UNLOCKS

    def _unlocks(self) -> None:
        console = self.console
        console.clear()
        console.print_at_color(11, 10, "Cards unlocked!", Color.GREEN)
        flags = cards.unlock(cards.HEAVY_STRIKE, self.player.unlocks)
        self.player.unlocks = cards.unlock(cards.IRON_WALL, flags)
        console.print_at(8, 12, "New cards available!")
        console.wait_key()
        self.music.play(TrackId.MENU)
        self.state = GameState.MENU


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the card battler in the terminal."""
    parser = argparse.ArgumentParser(prog="retrocards", description="Roguelike card battler.")
    parser.add_argument("--save", default=SAVE_FILE_NAME, help="save file path")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    console = Console()
    game = Game(console, rng=Lcg(args.seed), save_path=args.save)
    try:
        game.run()
    except (EOFError, KeyboardInterrupt):
        game._save()
        game.console.clear()
        game.console.print_at(10, 12, "Thanks for playing!")
    print(console.screen.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())