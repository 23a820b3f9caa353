# Authors: Raghav R V <rvraghav93@gmail.com>
#
# Licence: BSD 3 clause

from ._reader import ARFFReader

__all__ = ["load_arff_dataset",]

def load_arff_dataset(filename, load_data=True, encode_nominals=True,
                      config=None):
    """Load an ARFF file as ``(meta_data, data)``.

    ``meta_data`` is the dict returned by ``ARFFReader.get_metadata``;
    ``data`` is the numpy matrix of the rows, or None if ``load_data`` is
    False.
    """
    data = None

    arffreader = ARFFReader(filename, encode_nominals=encode_nominals,
                            config=config)
    meta_data = arffreader.get_metadata()

    if load_data:
        data = arffreader.get_data()

    return meta_data, data
