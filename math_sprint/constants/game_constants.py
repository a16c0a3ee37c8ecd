"""Game rules shared across the engine and UI layers."""

START_SECONDS: int = 30
CORRECT_BONUS_SECONDS: int = 1
TICK_INTERVAL_SECONDS: float = 1.0
CORRECT_FEEDBACK_SECONDS: float = 1.0
WRONG_FEEDBACK_SECONDS: float = 1.5
LOW_TIME_WARNING_SECONDS: int = 10

# Operand ranges, inclusive on both ends.
ADD_OPERAND_RANGE: tuple[int, int] = (1, 50)
SUBTRACT_MINUEND_RANGE: tuple[int, int] = (10, 59)
MULTIPLY_OPERAND_RANGE: tuple[int, int] = (1, 12)
DIVIDE_QUOTIENT_RANGE: tuple[int, int] = (1, 12)
DIVIDE_DIVISOR_RANGE: tuple[int, int] = (1, 12)

CORRECT_FEEDBACK_TEMPLATE: str = "Correct! +{bonus} second"
WRONG_FEEDBACK_TEMPLATE: str = "Wrong! Answer was {answer}"
