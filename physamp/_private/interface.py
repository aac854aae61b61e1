"""
Helpers for talking to the user.
"""

from tqdm.auto import tqdm

class MockTqdm():
    """
    Fake tqdm progress bar so we don't have to show a status bar if we don't
    want to. Can be substituted wherever we would use tqdm (i.e.
    tqdm(total=10) --> MockTqdm(total=10)).
    """

    def __init__(self,*args,**kwargs):
        pass
    def __enter__(self):
        return self
    def __exit__(self, type, value, traceback):
        pass

    def update(self,*args,**kwargs):
        pass

def get_progress_bar(silent):
    """
    Return the progress bar class to use given whether output is silenced.
    """

    if silent:
        return MockTqdm

    return tqdm

def display_result(label,value,silent=False):
    """
    Print a "label: value" line, aligned so a column of results lines up.

    Parameters
    ----------
    label : str
        description of the value
    value :
        value to report
    silent : bool, default=False
        if True, do not print anything
    """

    if silent:
        return

    print(f"{label:.<40}: {value}",flush=True)
