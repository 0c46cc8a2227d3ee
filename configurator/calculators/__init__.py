"""
Deterministic calculation core.

Pure Python math, no I/O, no state.
Given one configuration snapshot, derive the preview geometry
(geometry_scaler) and the itemized price (price_estimator).
"""
