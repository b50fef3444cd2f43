from . import primitives

PrimOp = primitives.PrimOp
lookup_primitive = primitives.lookup_primitive
check_arity = primitives.check_arity
eval_primitive = primitives.eval_primitive
