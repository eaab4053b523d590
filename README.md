# retrocards

A small roguelike card battler that runs on a 40 x 25 character screen. It
comes with a scripted chat-room intro sequence that uses the same screen
model. The package uses only the Python standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
retrocards [--save PATH] [--seed N]
```

`--save` sets the save file (default `cardbattle.sav` in the current
directory). `--seed` seeds the random generator; without it a time-based
seed is used.

In the terminal the game is line based. Before each key read it prints the
whole screen as plain text. Then it reads one line and takes the first
character of that line as the key press; an empty line counts as a key too.
End of input or Ctrl-C saves and leaves the game.

The game opens on a title screen and then shows the main menu. Press `N` to
start a new run and `Q` to quit. Each run has five encounters: slimes and
goblins first, then goblins and cultists, and a dragon boss last. In combat:

- keys `1`–`5` play a card from your hand,
- `E` ends your turn.

The enemy's intent for its next turn is shown under its hit points. After a
win you heal 10 HP. You may then add one of three random cards to your deck
(`1`–`3`) or skip with `4`. If you win a whole run, the win counter goes up
and the HEAVY STRIKE and IRON WALL unlock bits are set. The unlock mask and
the run and win counters are kept in the save file between sessions. The
unlock mask is only recorded: reward cards are drawn from the first ten
cards whether they are unlocked or not.

Starting deck: five STRIKE, four DEFEND and one BASH. Each turn you have
3 energy and draw up to five cards. Block is cleared at the start of each
turn.

## The intro

```
retrocards-intro [--fast]
```

This plays the eight-scene "CHAPTER 2 / THE RISE" sequence: typed IRC
chatter, sprite avatars sliding in and an animated port scan. Frames are
paced at about 60 per second; `--fast` drops the pauses. Scenes that wait for
a key end the sequence when the key is `Q`. Input works line by line, as in
the game. The final screen is printed when the sequence ends.

## Using the pieces

The game logic works without a terminal, so it can be driven from code or
from tests. `Console` and `Intro` take a `keys` iterable that yields one key
per poll, or `None` for "no key"; when it runs out, reading a key raises
`EOFError`.

- `retrocards.rng.Lcg` is the seeded 16-bit generator behind every random
  choice. It has `next_byte`, `range` and `shuffle`.
- `retrocards.cards` holds the card database. It has `card_by_id`,
  `card_name`, `is_unlocked` and `unlock`.
- `retrocards.player.Player` holds stats and the deck list, and
  `retrocards.deck.Deck` holds the draw pile, the hand and the discard pile.
- `retrocards.encounter` chooses the enemy for each floor and tracks run
  progress.
- `retrocards.enemy.Enemy.spawn` creates an enemy and works out its intent.
- `retrocards.combat.Combat` plays whole turns: `play_card`, `end_turn`,
  `render` and the key loop `run`.
- `retrocards.effects.EffectQueue` runs short flashes, shakes and damage
  numbers on a screen.
- `retrocards.game.Game` is the screen-to-screen state machine behind the
  `retrocards` command.
- `retrocards.persistence.SaveData` reads and writes the 64-byte save
  record. `save_game` and `load_game` go through a file path, and a
  missing, corrupted or foreign file raises `SaveError`.
- `retrocards.screen.Screen` is the character and colour grid. `row_text`
  and `render` turn it into plain text; `retrocards.ui.Console` draws on it
  and reads keys.
- `retrocards.music.MusicPlayer` steps the menu and combat tunes on a
  `Sid` register model, one tick per `update`.
- `retrocards.sprite.Vic` models sprite registers, and
  `retrocards.sprite_data` decodes sprite bitmaps with `decode_hires` and
  `decode_multicolor`.

```python
from retrocards.rng import Lcg
from retrocards.deck import Deck

rng = Lcg(12345)
deck = Deck([0, 0, 0, 1, 1, 2], rng)
deck.draw_to(5)
print(deck.hand)
```

## What it does not do

- There is no sound output. The music player only writes values into its
  register model.
- The terminal shows characters only. Colours, border and background,
  sprites and effect flashes exist in the screen and sprite models but are
  not drawn in the terminal.
- There is no real-time keyboard input. Keys are read one line at a time, so
  animations play out between key reads.