import logging
import sys

import pygame

import config
from game.session import SessionController
from ui.controls import ButtonBar, command_for_key, MOVE, RESTART, SHARE, QUIT
from ui.renderer import GameRenderer, board_pixel_size

# --- 로깅 설정 ---
logging.basicConfig(
    level=config.LOG_LEVEL,
    format=config.LOG_FORMAT,
    datefmt=config.LOG_DATEFMT
)
logger = logging.getLogger("2048")


def share(text):
    """공유 문구를 클립보드에 복사합니다. 실패해도 문구는 로그에 남깁니다."""
    logger.info("공유: %s", text)
    try:
        if not pygame.scrap.get_init():
            pygame.scrap.init()
        pygame.scrap.put_text(text)
    except (pygame.error, AttributeError) as e:
        logger.warning("클립보드 복사 실패: %s", e)


def run_command(controller, command, direction):
    """명령 하나를 처리합니다. 종료 명령이면 False를 반환합니다."""
    if command == QUIT:
        return False
    if command == MOVE:
        controller.move(direction)
    elif command == RESTART:
        controller.restart()
    elif command == SHARE:
        share(controller.share_text())
    return True


def main():
    pygame.init()
    config.init_fonts()
    screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
    pygame.display.set_caption("2048")
    clock = pygame.time.Clock()

    controller = SessionController()
    button_bar = ButtonBar(config.BOARD_Y_OFFSET + board_pixel_size() + 20, screen.get_width())
    renderer = GameRenderer(screen, button_bar)

    running = True
    try:
        while running:
            clock.tick(config.FPS)

            # 이벤트는 들어온 순서대로 하나씩 적용
            for event in pygame.event.get():
                action = None
                if event.type == pygame.QUIT:
                    action = (QUIT, None)
                elif event.type == pygame.KEYDOWN:
                    action = command_for_key(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    action = button_bar.hit(event.pos, controller.session)

                if action and not run_command(controller, *action):
                    running = False
                    break

            renderer.draw(controller.session)
            pygame.display.flip()

    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("예기치 못한 오류로 종료합니다.")
        raise
    finally:
        pygame.quit()

    logger.info("종료. 최종 점수: %d", controller.session.score)


if __name__ == '__main__':
    main()
    sys.exit()
