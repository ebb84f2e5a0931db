import json
import sys


def exit_message(msg, code=1):
    print(msg, file=sys.stderr)
    sys.exit(code)


def json_load_exit_bad(fn, arg_name):
    '''Load a json file or exit naming the command line option that pointed at it'''
    try:
        with open(fn, 'r') as f:
            return json.load(f)
    except OSError as e:
        exit_message("Could not read %s file %s: %s" % (arg_name, fn, e))
    except json.JSONDecodeError as e:
        exit_message("%s file %s is not valid JSON: %s" % (arg_name, fn, e))
