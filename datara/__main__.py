"""Module entrypoint for ``python -m datara``.

All argument parsing happens in ``datara.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
