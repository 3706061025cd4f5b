"""
Run with: python -m measureconverter
"""
from measureconverter.main import run

if __name__ == "__main__":
    run()
