from stylesnap.css.errors import CssParseError
from stylesnap.css.formatter import prettify, split_rules
from stylesnap.css.model import Block, Declaration, Stylesheet
from stylesnap.css.transformer import parse_css

__all__ = ["CssParseError", "prettify", "split_rules", "parse_css", "Block", "Declaration", "Stylesheet"]
