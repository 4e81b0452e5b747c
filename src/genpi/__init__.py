"""genpi: fictitious Japanese personal-information generator.

Usage:
    from genpi import create_generator, KanaForm

    generator = create_generator()
    pi = generator.generate(KanaForm.KATAKANA)
    print(pi.to_json())
"""

from .domain.errors import (
    BadRequest,
    Conflict,
    FetchFailure,
    GenPiError,
    InvalidConfiguration,
    NotHiragana,
)
from .domain.models import DateOfBirth, KanaForm, Name, PersonalInfo, Sex
from .usecase import GeneratePi

__version__ = "0.1.0"


def create_generator(**kwargs) -> GeneratePi:
    """Wire the production generator: namegen.jp → NamesCache → GeneratePi.

    Args:
        **kwargs: Passed to the ``NamegenSource`` constructor
            (``max_retries``, ``timeout``).
    """
    from .infra.cache import NamesCache
    from .infra.namegen import NamegenSource

    return GeneratePi(NamesCache(NamegenSource(**kwargs)))


__all__ = [
    "BadRequest",
    "Conflict",
    "DateOfBirth",
    "FetchFailure",
    "GenPiError",
    "GeneratePi",
    "InvalidConfiguration",
    "KanaForm",
    "Name",
    "NotHiragana",
    "PersonalInfo",
    "Sex",
    "create_generator",
]
