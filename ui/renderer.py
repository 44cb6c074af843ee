import pygame
import config
import numpy as np

from game.share import share_text


def board_pixel_size():
    return config.BOARD_SIZE * config.TILE_SIZE + (config.BOARD_SIZE + 1) * config.TILE_PADDING


class Tile:
    def __init__(self, value, pos):
        self.value = value
        self.pos = pos  # board 위치 (r, c)
        self.pixel_pos = self._get_pixel_pos(pos)

    def _get_pixel_pos(self, pos):
        """보드 좌표 (r, c)를 픽셀 좌표로 변환"""
        r, c = pos
        x = config.TILE_PADDING + c * (config.TILE_SIZE + config.TILE_PADDING)
        y = config.TILE_PADDING + r * (config.TILE_SIZE + config.TILE_PADDING)
        return [x, y]

    def draw(self, surface):
        x, y = self.pixel_pos
        rect = pygame.Rect(x, y, config.TILE_SIZE, config.TILE_SIZE)
        pygame.draw.rect(surface, config.TILE_COLORS.get(self.value, (60, 58, 50)), rect, border_radius=3)

        text_color = config.TEXT_COLORS.get(self.value, (249, 246, 242))
        text_surface = config.TILE_FONT.render(str(self.value), True, text_color)
        text_rect = text_surface.get_rect(center=rect.center)
        surface.blit(text_surface, text_rect)


class BoardRenderer:
    def __init__(self):
        self.tiles = []

    def set_board(self, board):
        self.tiles = [Tile(int(val), (r, c)) for (r, c), val in np.ndenumerate(board) if val != 0]

    def draw(self, surface, x_offset, y_offset):
        board_width = board_pixel_size()
        board_surface = pygame.Surface((board_width, board_width))
        board_surface.fill(config.GRID_COLOR)

        for r in range(config.BOARD_SIZE):
            for c in range(config.BOARD_SIZE):
                tile_x = config.TILE_PADDING + c * (config.TILE_SIZE + config.TILE_PADDING)
                tile_y = config.TILE_PADDING + r * (config.TILE_SIZE + config.TILE_PADDING)
                pygame.draw.rect(board_surface, config.TILE_COLORS[0],
                                 (tile_x, tile_y, config.TILE_SIZE, config.TILE_SIZE),
                                 border_radius=3)

        for tile in self.tiles:
            tile.draw(board_surface)

        surface.blit(board_surface, (x_offset, y_offset))


def banner_text(session):
    """게임 종료 배너 문구. 진행 중이면 None."""
    # 2048 달성 후 막힌 경우에도 승리 문구를 보여줌 (status는 "over")
    if session.won:
        return "You won!"
    if session.over:
        return "Game Over"
    return None


class GameRenderer:
    def __init__(self, screen, button_bar):
        self.screen = screen
        self.button_bar = button_bar
        self.board_renderer = BoardRenderer()

    def draw(self, session):
        self.screen.fill(config.BACKGROUND_COLOR)
        board_width = board_pixel_size()
        x = (self.screen.get_width() - board_width) // 2

        title = config.TITLE_FONT.render("2048", True, config.TEXT_COLOR)
        self.screen.blit(title, title.get_rect(center=(self.screen.get_width() // 2, 45)))

        self.board_renderer.set_board(session.grid)
        self.board_renderer.draw(self.screen, x, config.BOARD_Y_OFFSET)

        for button in self.button_bar.visible_buttons(session):
            self.draw_button(button)

        score_y = self.button_bar.direction_buttons[0].rect.bottom + 24
        score_text = config.SCORE_FONT.render(f"Score: {session.score}", True, config.TEXT_COLOR)
        self.screen.blit(score_text, score_text.get_rect(center=(self.screen.get_width() // 2, score_y)))

        text = banner_text(session)
        if text:
            self.draw_game_status_overlay(text, session.score)

    def draw_button(self, button):
        pygame.draw.rect(self.screen, config.BUTTON_COLOR, button.rect, border_radius=6)
        label = config.UI_FONT.render(button.label, True, config.BUTTON_TEXT_COLOR)
        self.screen.blit(label, label.get_rect(center=button.rect.center))

    def draw_game_status_overlay(self, text, score):
        share_button = self.button_bar.share_button
        color = (237, 194, 46) if text == "You won!" else config.TEXT_COLOR
        banner = config.BANNER_FONT.render(text, True, color)
        self.screen.blit(banner, banner.get_rect(midbottom=(share_button.rect.centerx, share_button.rect.top - 30)))

        caption = config.UI_FONT.render(share_text(score), True, config.TEXT_COLOR)
        self.screen.blit(caption, caption.get_rect(midbottom=(share_button.rect.centerx, share_button.rect.top - 6)))
