# memorymatch

A memory game for one player. All 52 cards of a standard deck are laid
face down in four rows of thirteen. Turn two over with the mouse. If
their ranks match, they stay face up. If not, click once more to turn
them back, and that counts as a miss. Clear the board with as few
misses as you can.

## Installing

```
pip install .
```

The game window uses pygame.

## Playing

```
memorymatch --data-dir DATA_DIR
```

`--data-dir` defaults to `data`. The directory must hold:

- `trump_BG.jpg` (background), `mj.png` (title), `click_mj.png`
  (blinking "click" prompt), `card_back.png`;
- `0.png` to `51.png`, the card faces;
- `mp/sellect.mp3`, `mp/miss.mp3` and `mp/collect0.mp3` to
  `mp/collect3.mp3`, the sound effects (loaded only when pygame's mixer
  is available).

How it plays:

- **Title screen**: click to deal a fresh, shuffled board.
- **Board**: click a face-down card to turn it over. Selected cards are
  outlined in red, matched pairs in yellow. Consecutive matches play a
  rising collect sound; a miss resets it. After a miss, click anywhere
  to hide the two cards again.
- **Result screen**: shows the number of misses and a message that
  depends on it. Click to go back to the title.

Press Escape or close the window to quit. The miss count is kept for
as long as the program runs; it is not reset when a new board is dealt.

## Using it as a library

The game logic does not need a display, so it can be driven directly:

```python
import random
from memorymatch.cards import Cards, card_origin

board = Cards(random.Random(1))
x, y = card_origin(0, 0)
sounds = board.update(True, x + 10, y + 10)   # select the top-left card
print(sounds, board.all_matched())
```

- `memorymatch.cards.Cards` holds the board: `deal()`, `update(clicked,
  mouse_x, mouse_y)` (returns the `Sound` members to play),
  `all_matched()`, and the `cards`, `phase` and `miss_count` members.
- `memorymatch.mouse.MouseInput` tracks per-frame button state with
  `update`, `is_on`, `is_released` and `is_repeat`.
- `memorymatch.hit.card_hit` tests whether a point lies on a card.
- `memorymatch.game.Game` runs the title, play and result scenes;
  `memorymatch.game.result_message` gives the result-screen text for a
  miss count.

## What it does not do

No images or sounds are included; the game needs a data directory as
described above. There is no background music, and scores are not
saved between runs.

## Tests

```
pip install .[test]
pytest
```