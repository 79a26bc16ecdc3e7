"""
emoji-core: распознавание эмодзи в тексте и замена :shortcode: на символы
"""

__version__ = "1.0.0"
