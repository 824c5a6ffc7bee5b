import pygame
import sys
from game import Game2048, Direction, Outcome


pygame.init()


COLORS = {
    'background': (248, 250, 252),
    'grid_background': (165, 174, 185),
    'empty_cell': (203, 213, 225),
    'text_dark': (51, 65, 85),
    'text_light': (255, 255, 255),
    'text_alert': (200, 0, 0),
    # tile colors
    2: (219, 234, 254),
    4: (191, 219, 254),
    8: (147, 197, 253),
    16: (96, 165, 250),
    32: (59, 130, 246),
    64: (37, 99, 235),
    128: (29, 78, 216),
    256: (30, 64, 175),
    512: (30, 58, 138),
    1024: (23, 37, 84),
    2048: (15, 23, 42),
    4096: (88, 28, 135),
    8192: (59, 7, 100),
}

KEY_ACTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_u: 'undo',
    pygame.K_r: 'restart',
    pygame.K_ESCAPE: 'quit',
    pygame.K_q: 'quit',
}


def action_for_key(key):
    """map a pygame key code to a Direction, 'undo', 'restart', 'quit' or None"""
    return KEY_ACTIONS.get(key)


class GameGUI:
    def __init__(self, game):
        """initialize game GUI around a new game"""
        self.game = game
        # restarts get the same parameters but fresh randomness
        self.params = dict(player=game.player, size=game.size, target=game.target,
                           undos=game.undos_left)
        self.outcome = Outcome.CONTINUE
        self.message = ""
        size = game.size

        # GUI settings, cells shrink on bigger boards
        self.cell_size = 400 // size
        self.cell_margin = 10
        self.header_height = 120

        # window size
        grid_size = size * self.cell_size + (size + 1) * self.cell_margin
        self.window_width = grid_size
        self.window_height = grid_size + self.header_height

        # create window
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("2048 Game")

        # fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)
        self.font_small = pygame.font.Font(None, 24)

        # game clock
        self.clock = pygame.time.Clock()

    def get_tile_color(self, value):
        """get background color for a tile value"""
        if value in COLORS:
            return COLORS[value]
        elif value > 8192:
            return COLORS[8192]
        else:
            return COLORS['empty_cell']

    def get_text_color(self, value):
        """get text color for a tile value"""
        if value <= 4:
            return COLORS['text_dark']
        else:
            return COLORS['text_light']

    def draw_board(self):
        """draw the game board"""
        self.screen.fill(COLORS['background'])

        self.draw_header()

        grid_y = self.header_height
        grid_rect = pygame.Rect(0, grid_y, self.window_width, self.window_width)
        pygame.draw.rect(self.screen, COLORS['grid_background'], grid_rect)

        for row in range(self.game.size):
            for col in range(self.game.size):
                self.draw_cell(row, col)

    def draw_header(self):
        """draw the header with score and instructions"""
        score_text = self.font_medium.render(
            f"{self.game.player}: {self.game.score}  Undos: {self.game.undos_left}",
            True, COLORS['text_dark'])
        self.screen.blit(score_text, (20, 20))

        outcome = self.outcome
        if outcome is Outcome.GAME_OVER_WIN:
            instruction_text = f"{self.game.player} wins! Press R to restart"
            color = COLORS['text_alert']
        elif outcome is Outcome.GAME_OVER:
            instruction_text = "Game Over! Press U to undo, R to restart"
            color = COLORS['text_alert']
        elif self.message:
            instruction_text = self.message
            color = COLORS['text_alert']
        else:
            instruction_text = "Arrows/WASD to move, U to undo"
            color = COLORS['text_dark']

        instruction_surface = self.font_small.render(instruction_text, True, color)
        self.screen.blit(instruction_surface, (20, 70))

        restart_text = self.font_small.render("Press R to restart, ESC to quit", True, COLORS['text_dark'])
        self.screen.blit(restart_text, (20, 95))

    def draw_cell(self, row, col):
        """draw a single cell of the grid"""
        value = self.game.cell(row, col)

        x = col * (self.cell_size + self.cell_margin) + self.cell_margin
        y = row * (self.cell_size + self.cell_margin) + self.cell_margin + self.header_height

        cell_rect = pygame.Rect(x, y, self.cell_size, self.cell_size)
        pygame.draw.rect(self.screen, self.get_tile_color(value), cell_rect, border_radius=8)

        if value != 0:
            # choose font size based on number of digits
            if value < 100:
                font = self.font_large
            elif value < 1000:
                font = self.font_medium
            else:
                font = self.font_small

            text_surface = font.render(str(value), True, self.get_text_color(value))

            text_rect = text_surface.get_rect()
            text_rect.center = (x + self.cell_size // 2, y + self.cell_size // 2)
            self.screen.blit(text_surface, text_rect)

    def handle_keypress(self, key):
        """keyboard input, returns False to quit"""
        action = action_for_key(key)
        self.message = ""

        if action == 'quit':
            return False
        elif action == 'restart':
            self.game = Game2048(**self.params)
            self.outcome = Outcome.CONTINUE
            print("Game restarted!")
        elif action == 'undo':
            if self.game.undo():
                self.outcome = Outcome.CONTINUE
            else:
                self.message = "Can't undo now"
        elif action is not None and self.outcome is Outcome.CONTINUE:
            self.outcome = self.game.push(action)

        return True

    def run(self):
        """main loop"""
        print("2048 Game Started!")
        print("Use arrow keys or WASD to move tiles, U to undo")
        print("Press R to restart, ESC to quit")
        print()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self.handle_keypress(event.key)

            self.draw_board()

            pygame.display.flip()

            self.clock.tick(60)

        pygame.quit()
        return self.outcome


def main():
    try:
        gui = GameGUI(Game2048("Player"))
        gui.run()
    except Exception as e:
        print(f"Error running game: {e}")
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
