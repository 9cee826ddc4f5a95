from puidkit.eval.uniformity import (
    chi_square_uniformity,
    expected_bits_per_symbol,
    measure_bit_usage,
    naive_bits_per_symbol,
    symbol_histogram,
    waste_reduction,
)

__all__ = [
    "chi_square_uniformity",
    "expected_bits_per_symbol",
    "measure_bit_usage",
    "naive_bits_per_symbol",
    "symbol_histogram",
    "waste_reduction",
]
