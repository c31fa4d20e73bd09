"""Run with: python -m directrix"""
from directrix.main import main

if __name__ == "__main__":
    main()
