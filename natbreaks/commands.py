"""Command-line interface and corresponding API for natbreaks."""
# NB: argparse CLI definitions and API functions are interwoven:
#   "_cmd_*" handles I/O and arguments processing for the command
#   "do_*" runs the command's functionality as an API
import argparse
import logging
from typing import List

import numpy as np
import pandas as pd

from . import fisher, jenks, metrics, params
from .cmdutil import read_values, write_dataframe, write_values
from .errors import BreaksInputError
from ._version import __version__


__all__ = []  # type: List[str]


def public(fn):
    __all__.append(fn.__name__)
    return fn


AP = argparse.ArgumentParser(
    description="natbreaks, optimal natural breaks for one-dimensional data.",
)
# Print help and exit if run without arguments
AP.set_defaults(func=lambda args: AP.print_help())
AP_subparsers = AP.add_subparsers(help="Sub-commands (use with -h for more info)")


# _____________________________________________________________________________
# Shared parameters
def add_classing_args(P):
    P.add_argument("filename",
                   help="""Input values: whitespace-separated numbers, or a
                   delimited table with a header if -c/--column is given.""")
    P.add_argument("-k", "--n-classes", type=int,
                   default=params.DEFAULT_N_CLASSES,
                   help="Number of classes. [Default: %(default)d]")
    P.add_argument("-c", "--column",
                   help="Name of the table column holding the values.")
    P.add_argument("-m", "--method", choices=params.BREAK_METHODS,
                   default="fisher",
                   help="""Classification method: 'fisher' (fast exact search)
                   or 'jenks' (classic matrix method, small inputs only).
                   [Default: %(default)s]""")
    P.add_argument("--engine", choices=params.SEARCH_ENGINES,
                   default=params.DEFAULT_ENGINE,
                   help="""Search engine for the 'fisher' method.
                   [Default: %(default)s]""")
    P.add_argument("--absolute-fallback", action="store_true",
                   help="""If there are no more distinct values than classes,
                   report their absolute values (legacy behavior).""")
    P.add_argument("-o", "--output", metavar="FILENAME",
                   help="Output file name. [Default: stdout]")


def _breaks_from_args(args):
    values = read_values(args.filename, args.column)
    breaks = do_breaks(values, args.n_classes, args.method, args.engine,
                       args.absolute_fallback)
    return values, breaks


# _____________________________________________________________________________
# Classification

# breaks ----------------------------------------------------------------------


@public
def do_breaks(values, n_classes, method="fisher",
              engine=params.DEFAULT_ENGINE, absolute_fallback=False):
    """Find natural breaks (class lower limits) of the given values."""
    if method not in params.BREAK_METHODS:
        raise BreaksInputError("'method' must be one of: %s; got: %r"
                               % (", ".join(params.BREAK_METHODS), method))
    logging.info("Finding %d natural breaks with method %r",
                 n_classes, method)
    if method == "jenks":
        # Same degenerate cases as the Fisher method
        if n_classes == 0:
            return np.array([], dtype=np.float64)
        values = np.asarray(values, dtype=np.float64)
        values = values[~np.isnan(values)]
        distinct = np.unique(values)
        if 0 < n_classes and len(distinct) <= n_classes:
            return np.abs(distinct) if absolute_fallback else distinct
        return jenks.jenks(values, n_classes)[:-1]
    return fisher.fisher_breaks(values, n_classes, engine, absolute_fallback)


def _cmd_breaks(args):
    """Compute natural breaks of a set of values."""
    _values, breaks = _breaks_from_args(args)
    write_values(args.output, breaks)


P_breaks = AP_subparsers.add_parser("breaks", help=_cmd_breaks.__doc__)
add_classing_args(P_breaks)
P_breaks.set_defaults(func=_cmd_breaks)


# classify --------------------------------------------------------------------


@public
def do_classify(values, breaks):
    """Label each value with the index of its class."""
    values = np.asarray(values, dtype=np.float64)
    values = values[~np.isnan(values)]
    return pd.DataFrame({
        "value": values,
        "class": metrics.assign_classes(values, breaks),
    })


def _cmd_classify(args):
    """Assign each value to a natural-breaks class."""
    values, breaks = _breaks_from_args(args)
    write_dataframe(args.output, do_classify(values, breaks))


P_classify = AP_subparsers.add_parser("classify", help=_cmd_classify.__doc__)
add_classing_args(P_classify)
P_classify.set_defaults(func=_cmd_classify)


# summary ---------------------------------------------------------------------


@public
def do_summary(values, breaks):
    """Summarize the classes and the goodness of variance fit (GVF)."""
    values = np.asarray(values, dtype=np.float64)
    values = values[~np.isnan(values)]
    table = metrics.class_summary(values, breaks)
    gvf = metrics.goodness_of_variance_fit(values, breaks)
    return table, gvf


def _cmd_summary(args):
    """Summarize the natural-breaks classes of a set of values."""
    values, breaks = _breaks_from_args(args)
    table, gvf = do_summary(values, breaks)
    logging.info("Goodness of variance fit: %.6f", gvf)
    write_dataframe(args.output, table)


P_summary = AP_subparsers.add_parser("summary", help=_cmd_summary.__doc__)
add_classing_args(P_summary)
P_summary.set_defaults(func=_cmd_summary)


# _____________________________________________________________________________
# Other commands


def print_version(_args):
    """Display this program's version."""
    print(__version__)


P_version = AP_subparsers.add_parser("version", help=print_version.__doc__)
P_version.set_defaults(func=print_version)


# _____________________________________________________________________________
# Shim for command-line execution


def parse_args(args=None):
    """Parse the command line."""
    return AP.parse_args(args=args)
