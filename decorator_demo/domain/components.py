"""
Domain Components

The Component capability, its concrete implementation, and the decorators
that wrap it. Pure Python, no framework dependencies.
"""


# =============================================================================
# COMPONENT CAPABILITY
# =============================================================================

class Component:
    """
    Base component interface.

    Defines the operation that decorators are able to alter. Every
    participant in a chain is substitutable for this type.
    """

    def operation(self) -> str:
        raise NotImplementedError(
            f"{type(self).__name__} has not implemented method 'operation'"
        )


class ConcreteComponent(Component):
    """Default implementation of the operation."""

    def operation(self) -> str:
        return "ConcreteComponent"


# =============================================================================
# DECORATORS
# =============================================================================

class Decorator(Component):
    """
    Base decorator.

    Follows the same interface as every other component and holds the
    wrapped component. By default all work is delegated to it.
    """

    def __init__(self, component: Component):
        if component is None:
            raise ValueError("Decorator requires a component to wrap")
        # Structural check: any object with an operation() is a component
        if not callable(getattr(component, "operation", None)):
            raise TypeError(
                f"{type(component).__name__} does not provide operation()"
            )
        self._component = component

    @property
    def component(self) -> Component:
        """The wrapped component (fixed at construction)."""
        return self._component

    def operation(self) -> str:
        return self._component.operation()


class ConcreteDecoratorA(Decorator):
    """Wraps the inner result in a ConcreteDecoratorA(...) marker."""

    def operation(self) -> str:
        return f"ConcreteDecoratorA({self.component.operation()})"


class ConcreteDecoratorB(Decorator):
    """Wraps the inner result in a ConcreteDecoratorB(...) marker."""

    def operation(self) -> str:
        return f"ConcreteDecoratorB({self.component.operation()})"


# Decorators available by name when composing a chain
DECORATORS = {
    "A": ConcreteDecoratorA,
    "B": ConcreteDecoratorB,
}
