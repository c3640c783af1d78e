from .arbitrary import Arbitrary, DefaultedArbitrary, extend_with_default, as_arbitrary

__all__ = ["Arbitrary", "DefaultedArbitrary", "extend_with_default", "as_arbitrary"]
