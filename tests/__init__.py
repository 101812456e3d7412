"""
Bộ kiểm thử cho trợ lý hỏi đáp sức khỏe HealthForumQA.
"""
