from .sympy_bridge import SympyBridge, to_sympy, symbolic_equal

__all__ = ["SympyBridge", "to_sympy", "symbolic_equal"]
