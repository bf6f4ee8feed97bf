"""
Client Driver

Client code works with every object through the Component interface,
so it stays independent of the concrete classes it is given.
"""

import sys
import logging
from typing import Iterable, Optional, TextIO, Union

from decorator_demo.domain.components import (
    DECORATORS,
    Component,
    ConcreteComponent,
    ConcreteDecoratorA,
    ConcreteDecoratorB,
)
from decorator_demo.application.models import ChainSpec

logger = logging.getLogger(__name__)

RESULT_LABEL = "RESULTADO: "


def client_code(component: Component, stream: Optional[TextIO] = None) -> str:
    """
    Invoke the component and display its result.

    Writes the label and result without a trailing newline.

    Args:
        component: Any object satisfying the Component interface
        stream: Output stream (default: stdout)

    Returns:
        The string produced by the component
    """
    out = stream if stream is not None else sys.stdout
    result = component.operation()
    out.write(f"{RESULT_LABEL}{result}")
    return result


def build_chain(
    names: Union[str, Iterable[str]],
    base: Optional[Component] = None
) -> Component:
    """
    Wrap a component in decorators, innermost first.

    Args:
        names: Decorator names as a list or comma-separated string
        base: Component to wrap. A new ConcreteComponent if None.

    Returns:
        The outermost component of the chain

    Raises:
        pydantic.ValidationError: If a name is not a known decorator
    """
    if not isinstance(names, str):
        names = list(names)
    spec = ChainSpec(decorators=names)

    component = base if base is not None else ConcreteComponent()
    for name in spec.decorators:
        component = DECORATORS[name](component)
        logger.debug("Wrapped chain in %s", type(component).__name__)

    return component


def run_demo(stream: Optional[TextIO] = None) -> None:
    """
    Run the demonstration: a simple component, then a decorated one.

    Args:
        stream: Output stream (default: stdout)
    """
    out = stream if stream is not None else sys.stdout

    # The client supports simple components...
    simple = ConcreteComponent()
    out.write("Client: I have a simple component:\n")
    client_code(simple, out)
    out.write("\n\n")

    # ...as well as decorated ones. Decorators wrap other decorators too.
    decorator1 = ConcreteDecoratorA(simple)
    decorator2 = ConcreteDecoratorB(decorator1)
    out.write("Client: Now I have a decorated component:\n")
    client_code(decorator2, out)
    out.write("\n\n")
