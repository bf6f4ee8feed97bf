"""
Decorator Pattern Demonstration

A concrete component wrapped by stackable decorators that each augment its
result while keeping the same Component interface.

Architecture:
    - decorator_demo/domain: Component capability and decorators
    - decorator_demo/application: Client driver and chain composition
    - decorator_demo/infrastructure: Configuration and logging setup
    - decorator_demo/interfaces: CLI

Usage:
    from decorator_demo.application.client import build_chain, client_code

    chain = build_chain(["A", "B"])
    client_code(chain)
    # RESULTADO: ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent))
"""

__version__ = "1.0.0"
