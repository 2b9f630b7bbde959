from __future__ import annotations

import pygame


class InputState:
    def __init__(self) -> None:
        self.keys = pygame.key.get_pressed()
        self.prev_keys = self.keys

    def update(self) -> None:
        # Keep the previous snapshot to allow "pressed" (edge) queries
        self.prev_keys = self.keys
        self.keys = pygame.key.get_pressed()

    def key(self, key: int) -> bool:
        return bool(self.keys[key])

    def key_pressed(self, key: int) -> bool:
        # True only on the frame the key becomes down
        return bool(self.keys[key]) and not bool(self.prev_keys[key])

    def axis(self, negative: int, positive: int) -> float:
        """-1, 0 or +1 depending on which of two held keys is down."""
        return float(self.key(positive)) - float(self.key(negative))
