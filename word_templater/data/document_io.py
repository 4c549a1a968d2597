"""文档读写操作."""

from pathlib import Path
from typing import Union

from loguru import logger

from word_templater.data.models import GeneratedDocument


class DocumentIO:
    """文档读写操作类."""

    @staticmethod
    def load_template(file_path: Union[str, Path]) -> bytes:
        """读取Word模板内容.

        每次调用都从磁盘重新读取，各次生成之间互不影响。

        Args:
            file_path: 模板路径

        Returns:
            模板文档内容

        Raises:
            FileNotFoundError: 文件不存在
            ValueError: 文件格式不正确
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"文件不存在: {file_path}")

        if file_path.suffix.lower() not in ['.docx']:
            raise ValueError(f"不支持的文件类型: {file_path.suffix}")

        template = file_path.read_bytes()
        logger.debug(f"已加载模板: {file_path} ({len(template)} 字节)")
        return template

    @staticmethod
    def clear_directory(directory: Union[str, Path]) -> None:
        """清空输出目录中的文件，目录不存在时创建.

        Args:
            directory: 输出目录
        """
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        removed = 0
        for path in directory.iterdir():
            if path.is_file():
                path.unlink()
                removed += 1
        logger.info(f"已清空输出目录: {directory}，删除 {removed} 个文件")

    @staticmethod
    def save_document(document: GeneratedDocument, output_dir: Union[str, Path]) -> Path:
        """保存生成的文档.

        Args:
            document: 生成的文档
            output_dir: 输出目录

        Returns:
            保存后的文件路径

        Raises:
            ValueError: 保存失败
        """
        output_path = Path(output_dir) / document.file_name
        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            output_path.write_bytes(document.document)
            logger.info(f"已保存文档: {output_path}")
        except OSError as e:
            logger.error(f"保存文档失败: {e}")
            raise ValueError(f"保存文档失败: {e}")
        return output_path
