from word_templater.app.processor import BatchProcessor
from loguru import logger

# 测试日志级别
logger.debug("这是DEBUG级别的日志消息")
logger.info("这是INFO级别的日志消息")
logger.warning("这是WARNING级别的日志消息")

processor = BatchProcessor()
result = processor.process(
    "resources/Employees.xlsx",
    "resources/EmployeeTemplate.docx",
    "documents",
)

print(result.report)
