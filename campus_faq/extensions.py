# Global Engines (Initialized in main.py)
faq_engine = None
