"""
Domain Layer

The Component capability and its decorators.
No dependencies on external frameworks.
"""

from decorator_demo.domain.components import (
    DECORATORS,
    Component,
    ConcreteComponent,
    Decorator,
    ConcreteDecoratorA,
    ConcreteDecoratorB,
)
