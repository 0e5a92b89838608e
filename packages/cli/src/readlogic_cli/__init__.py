"""
ReadLogic CLI - command line front end for the ReadLogic parser
"""

from .config import CLIConfig
from .includes import load_knowledge_base, split_sentences

__all__ = ['CLIConfig', 'load_knowledge_base', 'split_sentences']
