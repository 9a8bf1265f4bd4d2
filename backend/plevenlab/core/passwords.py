# plevenlab/core/passwords.py
"""
Random password generation.
Produces one-time passwords that satisfy a ComplexityPolicy (length,
distinct characters, required character classes).

All randomness comes from the `secrets` module (OS CSPRNG), which is safe to
call from concurrent requests without locking.
"""
import secrets
from dataclasses import dataclass

from plevenlab.core.errors import CredentialError, ErrorKind

# Ambiguous glyphs (I, l) are left out of the letter alphabets
UPPERCASE = "ABCDEFGHJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijkmnopqrstuvwxyz"
DIGITS = "0123456789"
SYMBOLS = "!@$?_-"

ALPHABETS = (UPPERCASE, LOWERCASE, DIGITS, SYMBOLS)
MAX_UNIQUE_CHARS = len(set("".join(ALPHABETS)))

# Extra fill iterations allowed beyond min_length before giving up
FILL_ITERATION_SLACK = 10_000


@dataclass(frozen=True)
class ComplexityPolicy:
    """
    Strength requirements for a generated password.

    Attributes:
        min_length: Minimum number of characters
        min_unique_chars: Minimum number of distinct characters
        require_upper: At least one character from UPPERCASE
        require_lower: At least one character from LOWERCASE
        require_digit: At least one character from DIGITS
        require_symbol: At least one character from SYMBOLS
    """
    min_length: int = 8
    min_unique_chars: int = 4
    require_upper: bool = True
    require_lower: bool = True
    require_digit: bool = True
    require_symbol: bool = True

    def __post_init__(self):
        for name in ("min_length", "min_unique_chars"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise CredentialError(ErrorKind.INVALID_INPUT, f"{name} must be a non-negative integer")

    def required_alphabets(self) -> list[str]:
        """Alphabets that must be represented, in upper -> lower -> digit -> symbol order."""
        flags = (self.require_upper, self.require_lower, self.require_digit, self.require_symbol)
        return [alphabet for alphabet, required in zip(ALPHABETS, flags) if required]


# Policy used for the auto-created administrator account
DEFAULT_ADMIN_POLICY = ComplexityPolicy(
    min_length=16,
    min_unique_chars=8,
    require_upper=True,
    require_lower=True,
    require_digit=True,
    require_symbol=True,
)


_shuffler = secrets.SystemRandom()


def generate_password(policy: ComplexityPolicy | None = None) -> str:
    """
    Generate a random password respecting the given policy.

    One character of every required class is drawn first, then characters
    from a randomly chosen class are added until both the length and the
    distinct-character thresholds are met. The result is shuffled once at
    the end, so the required characters land at uniformly random positions
    and the work stays linear in the password length.

    Args:
        policy: Strength requirements (defaults to ComplexityPolicy())

    Returns:
        The generated password

    Raises:
        CredentialError(POLICY_UNSATISFIABLE): If the policy asks for more
            distinct characters than the alphabets contain, or the fill loop
            exceeds its iteration cap
    """
    policy = policy or ComplexityPolicy()
    if policy.min_unique_chars > MAX_UNIQUE_CHARS:
        raise CredentialError(
            ErrorKind.POLICY_UNSATISFIABLE,
            f"min_unique_chars={policy.min_unique_chars} exceeds the {MAX_UNIQUE_CHARS} available characters",
        )

    chars = [secrets.choice(alphabet) for alphabet in policy.required_alphabets()]
    seen = set(chars)

    max_iterations = policy.min_length + FILL_ITERATION_SLACK
    iterations = 0
    while len(chars) < policy.min_length or len(seen) < policy.min_unique_chars:
        if iterations >= max_iterations:
            raise CredentialError(
                ErrorKind.POLICY_UNSATISFIABLE,
                f"Could not satisfy policy within {max_iterations} iterations",
            )
        char = secrets.choice(secrets.choice(ALPHABETS))
        chars.append(char)
        seen.add(char)
        iterations += 1

    _shuffler.shuffle(chars)
    return "".join(chars)
