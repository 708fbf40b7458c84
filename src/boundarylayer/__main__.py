"""
Run with: python -m boundarylayer
"""
from boundarylayer.main import main

if __name__ == "__main__":
    main()
