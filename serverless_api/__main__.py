"""Entry point: python -m serverless_api"""

from serverless_api.api.main import run

if __name__ == "__main__":
    run()
