import pygame

import config
from game.direction import Direction

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}

# 명령 이름
MOVE = "move"
RESTART = "restart"
SHARE = "share"
QUIT = "quit"


def command_for_key(key):
    """키 코드를 (명령, 방향) 튜플로 변환합니다. 해당 없으면 None."""
    if key in KEY_DIRECTIONS:
        return MOVE, KEY_DIRECTIONS[key]
    if key == pygame.K_r:
        return RESTART, None
    if key == pygame.K_ESCAPE:
        return QUIT, None
    return None


class Button:
    def __init__(self, label, rect, command, direction=None):
        self.label = label
        self.rect = pygame.Rect(rect)
        self.command = command
        self.direction = direction


class ButtonBar:
    """보드 아래의 방향 버튼(↑ ← ↓ →)과 게임 종료 후 나타나는 공유 버튼."""
    def __init__(self, top, width=config.SCREEN_WIDTH):
        total = 4 * config.BUTTON_WIDTH + 3 * config.BUTTON_GAP
        x = (width - total) // 2
        self.direction_buttons = []
        for i, (label, direction) in enumerate([
            ("↑", Direction.UP),
            ("←", Direction.LEFT),
            ("↓", Direction.DOWN),
            ("→", Direction.RIGHT),
        ]):
            rect = (x + i * (config.BUTTON_WIDTH + config.BUTTON_GAP), top,
                    config.BUTTON_WIDTH, config.BUTTON_HEIGHT)
            self.direction_buttons.append(Button(label, rect, MOVE, direction))

        share_top = top + config.BUTTON_HEIGHT + config.BUTTON_GAP * 10
        share_x = (width - config.SHARE_BUTTON_WIDTH) // 2
        self.share_button = Button(
            "Share", (share_x, share_top, config.SHARE_BUTTON_WIDTH, config.BUTTON_HEIGHT), SHARE)

    def visible_buttons(self, session):
        buttons = list(self.direction_buttons)
        if session.won or session.over:
            buttons.append(self.share_button)
        return buttons

    def hit(self, pos, session):
        """마우스 위치에 있는 버튼의 (명령, 방향)을 반환합니다."""
        for button in self.visible_buttons(session):
            if button.rect.collidepoint(pos):
                return button.command, button.direction
        return None
