from shaderprep.processing.directives import IncludeDirective, match_include, scan_includes
from shaderprep.processing.provenance import TextWithProvenance

__all__ = ['IncludeDirective', 'TextWithProvenance', 'match_include', 'scan_includes']
