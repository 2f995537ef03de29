"""
Job Screener - Requirement gap scanning and application answer autofill

This package:
1. Scans job postings for implicit screening requirements (citizenship,
   clearance, sponsorship, on-site work, ...)
2. Compares them with your requirement profile and reports the gaps
3. Classifies application questions into known categories
4. Finds, stores and seeds answers in your answer bank
"""

__version__ = "1.0.0"
__author__ = "Job Screener"
