# Client packages
from .s3_manager import S3Manager, is_not_found

__all__ = ['S3Manager', 'is_not_found']
