"""Run the Blog API: python -m blog_api"""
import uvicorn

from .config import HOST, PORT, LOG_LEVEL


def main():
    uvicorn.run("blog_api.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL)


if __name__ == "__main__":
    main()
