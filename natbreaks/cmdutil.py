"""Functions reused within command-line implementations."""
import contextlib
import logging
import os
import sys

import numpy as np
import pandas as pd


def read_values(infile, column=None):
    """Read numeric values from a file.

    Without `column`, the file holds whitespace-separated numbers (any
    layout). With `column`, it is a delimited table with a header row and the
    named column is used.
    """
    if column is None:
        values = np.loadtxt(infile, ndmin=1).ravel()
    else:
        table = pd.read_csv(infile, sep=None, engine="python")
        if column not in table:
            raise ValueError("Column %r not in %s; available: %s"
                             % (column, get_filename(infile) or "input",
                                ", ".join(map(str, table.columns))))
        values = pd.to_numeric(table[column], errors="coerce").to_numpy()
    logging.info("Read %d values from %s", len(values),
                 get_filename(infile) or "input")
    return values


@contextlib.contextmanager
def open_output(outfname):
    """Yield a text handle for `outfname`, or stdout if no name is given.

    Missing parent directories of `outfname` are created.
    """
    if not outfname:
        yield sys.stdout
        return
    os.makedirs(os.path.dirname(os.path.abspath(outfname)), exist_ok=True)
    with open(outfname, "w") as handle:
        yield handle
    logging.info("Wrote %s", outfname)


def get_filename(infile):
    """Name of an input path or named file handle, if any."""
    if isinstance(infile, (str, os.PathLike)):
        return os.fspath(infile)
    return getattr(infile, "name", None)


def write_values(outfname, values):
    """Write one number per line, in shortest round-trip form."""
    with open_output(outfname) as handle:
        handle.writelines(repr(float(val)) + "\n" for val in values)


def write_dataframe(outfname, dframe, header=True):
    """Write a pandas.DataFrame to a tab-separated file at full precision."""
    with open_output(outfname) as handle:
        dframe.to_csv(handle, header=header, index=False, sep="\t")
