"""
Base class shared by the source and the target AST.
"""

from __future__ import annotations


class Node:
    @property
    def kind(self) -> str:
        return self.__class__.__name__

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{self.kind}({fields})"

    def accept(self, visitor, ctx=None):
        # the most specific handler wins, visitNode catches whatever is left
        for cls in type(self).__mro__:
            visit_func = getattr(visitor, f"visit{cls.__name__}", None)
            if visit_func is not None:
                return visit_func(self, ctx)
        raise NotImplementedError(f"{type(visitor).__name__} cannot visit {self.kind}")
