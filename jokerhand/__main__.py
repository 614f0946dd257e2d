"""支持 python -m jokerhand"""

from .ui.cli import main

if __name__ == "__main__":
    main()
