"""Performance benchmarks for Quipu.

This package contains microbenchmarks for the Nelder-Mead loop on standard
test functions.
"""
