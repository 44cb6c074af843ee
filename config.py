import logging

# --- 게임 규칙 설정 ---
BOARD_SIZE = 4
WIN_TILE = 2048
START_TILES = 2
TILE_VALUES = (2, 4)
TILE_PROBABILITIES = (0.9, 0.1)

# --- 공유 설정 ---
SHARE_URL = "https://mini-2048.app"
SHARE_TEMPLATE = "I scored {score} in 2048! {url}"

# --- 로깅 설정 ---
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# --- 화면 및 UI 설정 ---
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 720
BACKGROUND_COLOR = (250, 248, 239)
GRID_COLOR = (187, 173, 160) # 게임 보드 배경색
TEXT_COLOR = (119, 110, 101)
FPS = 30

# --- 게임 보드 설정 ---
TILE_SIZE = 80
TILE_PADDING = 10
BOARD_Y_OFFSET = 90

# --- 버튼 설정 ---
BUTTON_WIDTH = 80
BUTTON_HEIGHT = 44
BUTTON_GAP = 10
BUTTON_COLOR = (143, 122, 102)
BUTTON_TEXT_COLOR = (249, 246, 242)
SHARE_BUTTON_WIDTH = 160

# --- 폰트 설정 ---
# 폰트 변수들을 선언만 하고, 실제 로딩은 init_fonts() 함수에서 수행합니다.
TITLE_FONT = None
SCORE_FONT = None
TILE_FONT = None
UI_FONT = None
BANNER_FONT = None


def init_fonts():
    """pygame 초기화 이후에 폰트를 로딩합니다."""
    global TITLE_FONT, SCORE_FONT, TILE_FONT, UI_FONT, BANNER_FONT
    import pygame

    pygame.font.init()
    TITLE_FONT = pygame.font.Font(None, 56)
    SCORE_FONT = pygame.font.Font(None, 32)
    TILE_FONT = pygame.font.Font(None, 40)
    UI_FONT = pygame.font.Font(None, 28)
    BANNER_FONT = pygame.font.Font(None, 44)


# --- 타일 색상 ---
TILE_COLORS = {
    0: (205, 193, 180),
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
    4096: (60, 58, 50),
    8192: (60, 58, 50),
}

TEXT_COLORS = {
    2: (119, 110, 101),
    4: (119, 110, 101),
    8: (249, 246, 242),
    16: (249, 246, 242),
    32: (249, 246, 242),
    64: (249, 246, 242),
    128: (249, 246, 242),
    256: (249, 246, 242),
    512: (249, 246, 242),
    1024: (249, 246, 242),
    2048: (249, 246, 242),
    4096: (249, 246, 242),
    8192: (249, 246, 242),
}
