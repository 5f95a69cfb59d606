from polebench.evaluation.controller import BangBangController, ConstantController
from polebench.evaluation.simulate import simulate

__all__ = [
    "BangBangController",
    "ConstantController",
    "simulate",
]
