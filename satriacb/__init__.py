"""SatriaCb: proxy between a static chat UI and generative-language / messaging-bot APIs."""

__version__ = "1.0.0"
