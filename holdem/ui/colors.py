"""
ANSI color codes used by the terminal table view.
"""


class Colors:
    """ANSI color codes for terminal formatting."""
    RED = '\033[31m'
    BLACK = '\033[30m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'
    WHITE = '\033[37m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    GREY = '\033[90m'
    RESET = '\033[0m'
    BG_WHITE = '\033[47m'
    CLEAR_SCREEN = '\033[2J\033[H'

    @staticmethod
    def strip(text: str) -> str:
        """Remove every escape sequence defined above from ``text``."""
        for name, code in vars(Colors).items():
            if name.isupper():
                text = text.replace(code, '')
        return text
