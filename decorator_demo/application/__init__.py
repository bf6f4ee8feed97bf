"""
Application Layer

Client driver and decorator chain composition.
"""

from decorator_demo.application.client import (
    DECORATORS,
    build_chain,
    client_code,
    run_demo,
)
from decorator_demo.application.models import ChainSpec
