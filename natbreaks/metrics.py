"""Evaluate how well a set of breaks classifies the data."""
import numpy as np
import pandas as pd


def assign_classes(values, breaks):
    """Index of the class each value falls in.

    Breaks are class lower limits: value x is in class j if
    ``breaks[j] <= x < breaks[j+1]``. Values below the first break go to the
    first class, values above the last break to the last class.
    """
    values = np.asarray(values, dtype=np.float64)
    breaks = np.asarray(breaks, dtype=np.float64)
    if not len(breaks):
        raise ValueError("Need at least one break to assign classes")
    idx = np.searchsorted(breaks, values, side="right") - 1
    return np.clip(idx, 0, len(breaks) - 1)


def _weights_like(values, weights):
    if weights is None:
        return np.ones(len(values))
    weights = np.asarray(weights, dtype=np.float64)
    if len(weights) != len(values):
        raise ValueError("Unequal array lengths: values=%d, weights=%d"
                         % (len(values), len(weights)))
    return weights


def total_ss(values, weights=None):
    """Weighted sum of squared deviations from the overall mean (SDAM)."""
    values = np.asarray(values, dtype=np.float64)
    if not len(values):
        return 0.0
    weights = _weights_like(values, weights)
    mean = np.average(values, weights=weights)
    return float((weights * (values - mean) ** 2).sum())


def within_class_ss(values, breaks, weights=None):
    """Weighted sum of squared deviations from each class mean.

    Returns an array with one entry per break (class); empty classes get 0.
    """
    values = np.asarray(values, dtype=np.float64)
    weights = _weights_like(values, weights)
    classes = assign_classes(values, breaks)
    n_classes = len(breaks)
    class_weight = np.bincount(classes, weights, minlength=n_classes)
    class_sum = np.bincount(classes, weights * values, minlength=n_classes)
    means = np.divide(class_sum, class_weight,
                      out=np.zeros(n_classes), where=class_weight > 0)
    deviations = weights * (values - means[classes]) ** 2
    return np.bincount(classes, deviations, minlength=n_classes)


def goodness_of_variance_fit(values, breaks, weights=None):
    """Goodness of variance fit, GVF = (SDAM - SDCM) / SDAM.

    1.0 means every class is internally constant. A constant dataset has
    nothing to explain and also scores 1.0.
    """
    sdam = total_ss(values, weights)
    if sdam == 0:
        return 1.0
    sdcm = within_class_ss(values, breaks, weights).sum()
    return (sdam - sdcm) / sdam


def class_summary(values, breaks):
    """Table of the classes: bounds, size, mean and sum of squares."""
    values = np.asarray(values, dtype=np.float64)
    breaks = np.asarray(breaks, dtype=np.float64)
    classes = assign_classes(values, breaks)
    grouped = pd.Series(values).groupby(classes)
    table = pd.DataFrame({
        "class": np.arange(len(breaks)),
        "lower": breaks,
    }).set_index("class")
    table["upper"] = grouped.max()
    table["count"] = grouped.size()
    table["mean"] = grouped.mean()
    table["ss"] = within_class_ss(values, breaks)
    table["count"] = table["count"].fillna(0).astype(int)
    return table.reset_index()
