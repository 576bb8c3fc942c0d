"""
Converter configuration settings.

File constraints and output naming for the callers of the conversion
pipeline. The pipeline itself always emits DD/MM/YYYY dates and does not
read these settings.
"""
import os
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from citisage.utils.constants import MAX_FILE_SIZE_MB


@dataclass
class ConverterConfig:
    """Configuration class for upload limits and output file naming."""

    max_size_mb: int = MAX_FILE_SIZE_MB  # Largest accepted upload
    allowed_extensions: Tuple[str, ...] = field(default_factory=lambda: ('.csv',))
    filename_template: str = '{originalName}_sage_{date}'
    output_encoding: str = 'utf-8'

    @classmethod
    def from_environment(cls) -> 'ConverterConfig':
        """
        Create configuration from environment variables with fallback to defaults.

        Environment variables:
        - CONVERTER_MAX_SIZE_MB
        - CONVERTER_ALLOWED_EXTENSIONS (comma separated, e.g. ".csv,.txt")
        - CONVERTER_FILENAME_TEMPLATE
        - CONVERTER_OUTPUT_ENCODING
        """
        extensions = os.getenv('CONVERTER_ALLOWED_EXTENSIONS', '.csv')
        return cls(
            max_size_mb=int(os.getenv('CONVERTER_MAX_SIZE_MB', MAX_FILE_SIZE_MB)),
            allowed_extensions=tuple(
                ext.strip().lower() for ext in extensions.split(',') if ext.strip()
            ),
            filename_template=os.getenv('CONVERTER_FILENAME_TEMPLATE', '{originalName}_sage_{date}'),
            output_encoding=os.getenv('CONVERTER_OUTPUT_ENCODING', 'utf-8')
        )

    @property
    def max_size_bytes(self) -> int:
        return self.max_size_mb * 1024 * 1024

    def generate_output_filename(self, original_name: str, now: Optional[datetime] = None) -> str:
        """
        Build the output file name from filename_template.

        Placeholders: {originalName} (without extension), {date} (YYYY-MM-DD),
        {time} (HH-MM-SS) and {datetime} ({date}_{time}).
        """
        now = now or datetime.now()
        date_str = now.strftime('%Y-%m-%d')
        time_str = now.strftime('%H-%M-%S')
        base_name = re.sub(r'\.[^/.]+$', '', os.path.basename(original_name))

        filename = (
            self.filename_template
            .replace('{originalName}', base_name)
            .replace('{date}', date_str)
            .replace('{time}', time_str)
            .replace('{datetime}', f"{date_str}_{time_str}")
        )
        return f"{filename}.csv"
