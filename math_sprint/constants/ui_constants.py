"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Math Sprint"
HEADER_TITLE: str = "Math Sprint"
HEADER_SUBTITLE: str = "How fast can you solve math problems?"
DEFAULT_GAME_FONT_SIZE: int = 14
WINDOW_MIN_WIDTH: int = 420

IDLE_PROMPT: str = "Click Start or begin typing to play!"
QUESTION_TEMPLATE: str = "{first} {symbol} {second} = ?"
ENDED_TEMPLATE: str = "Time's Up! Final Score: {score}"
ANSWER_PLACEHOLDER: str = "Enter your answer..."

SCORE_TEMPLATE: str = "Score: {score}"
BEST_TEMPLATE: str = "Best: {best}"
TIME_TEMPLATE: str = "{seconds}s"
TIME_CAPTION: str = "Time:"

START_BUTTON: str = "Start Game"
SUBMIT_BUTTON: str = "Submit Answer"
RESTART_BUTTON: str = "Play Again"
ABOUT_BUTTON: str = "About"
SETTINGS_BUTTON: str = "Settings"

INSTRUCTIONS_MARKDOWN: str = (
    "- Solve math problems as fast as you can\n"
    "- Correct answers add +1 second\n"
    "- Includes +, -, ×, ÷ operations"
)
