from mdadf.models import AdfNode, Mark
from mdadf.utils.adf_helpers import convert, convert_document, text_to_adf

__all__ = ['AdfNode', 'Mark', 'convert', 'convert_document', 'text_to_adf']
