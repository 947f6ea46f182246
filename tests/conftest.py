import os


os.environ.setdefault("FORMER_TRANSLATE_FROM", "validation.attributes")
os.environ.setdefault("FORMER_ENABLE_DEBUG_LOG", "false")
