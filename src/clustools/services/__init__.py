"""聚类服务

- normalizer: 原始分数归一化
- input_reader: 分数文件读取
- clustering: 聚类策略
- analytics: 聚类统计和轮廓系数
- report_formatter: 文本报告
- pipeline: 完整聚类流程
"""
