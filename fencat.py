"""
Root entry point – delegates to the fencat package.

Usage:
    python fencat.py fen.txt
    python fencat.py --flip fen.txt
    echo rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR | python fencat.py
"""

from fencat.main import main

if __name__ == "__main__":
    main()
