from blisp.builtin.env_builtin import BUILTINS, call_builtin, register

__all__ = ["BUILTINS", "call_builtin", "register"]
