"""writer — cutting-sheet prose for panels, layouts and cut plans."""

from skirtplan.writer.writer import CuttingWriter, TemplateWriter, WriterInput, WriterOutput

__all__ = ["CuttingWriter", "TemplateWriter", "WriterInput", "WriterOutput"]
