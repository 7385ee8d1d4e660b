# this file is for CI only.
# https://github.com/pypa/pip/issues/7498
try:
    from pip._internal.main import main
    if not callable(main):
        raise ImportError

except ImportError:
    try:
        from pip._internal import main
        if not callable(main):
            raise ImportError

    except ImportError:
        from pip import main

        if not callable(main):
            raise ImportError

requires = ['attrs>=19.2.0', 'pytest']

if __name__ == '__main__':
    for package in requires:
        main(['install', package])
