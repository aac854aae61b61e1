"""
Construct a command line argument parser for a function, parse the command
line arguments, and then run the function.
"""

import sys, inspect, argparse, re

def _optional_int(value):
    """
    argparse type for int arguments whose default is None.
    """
    if value.lower() == "none":
        return None
    return int(value)

def wrap_function(fcn,argv=None,optional_arg_types={},prefix="physamp"):
    """
    Construct a command line argument parser for a function, parse the command
    line arguments, and then run the function.

    Parameters
    ----------
    fcn : function
        function to run.
    argv : list, optional
        arguments to parse. if None, use sys.argv[1:]
    optional_arg_types : dict, optional
        dictionary of arg types for arguments with None as their default in the
        function. If an argument where default is None is not in
        optional_arg_types, treat argument as str.
    prefix : str, default="physamp"
        program name prefix. The program is called prefix-function-name.

    Return
    ------
    argparse.ArgumentParser().parse_args(argv) : argparse.Namespace
        namespace shows how command line was parsed
    """

    if argv is None:
        argv = sys.argv[1:]

    prog = re.sub("_","-",fcn.__name__)
    prog = f"{prefix}-{prog}"

    # Description is the function docstring up to its parameter list
    description = inspect.getdoc(fcn)
    if description is None:
        description = ""
    description = description.split("Parameters\n")[0]

    parser = argparse.ArgumentParser(prog=prog,
                                     description=description,
                                     formatter_class=argparse.RawTextHelpFormatter)

    # Build parser arguments using signature of fcn
    param = inspect.signature(fcn).parameters
    for p in param:

        # If no default specified, make required and move on.
        if param[p].default is param[p].empty:
            parser.add_argument(p)
            continue

        # For default is None args, parse as optional_arg_types or str
        if param[p].default is None:
            arg_type = optional_arg_types.get(p,str)
            if arg_type is int:
                arg_type = _optional_int

        # Otherwise, just grab the type
        else:
            arg_type = type(param[p].default)

        kwargs = {}
        if arg_type is bool:
            if param[p].default is True:
                kwargs["action"] = "store_false"
            else:
                kwargs["action"] = "store_true"
        else:
            kwargs["type"] = arg_type
            kwargs["default"] = param[p].default

        parser.add_argument(f"--{p}",**kwargs)

    args = parser.parse_args(argv)

    # Call function with kwargs
    try:
        fcn(**args.__dict__)
    except Exception as e:
        err = f"\n\nFunction {fcn.__name__} raised an error.\n\n"
        err += f"To see command line help, run {prog} --help\n\n"
        raise RuntimeError(err) from e

    return args
