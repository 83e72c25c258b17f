"""Algorithms behind box-and-whisker chart updates.

Pure numpy reference implementations of each step of an update: quantile
estimation, whisker classification, outlier detection, category
summarization, axis planning and label collision resolution.
"""
