"""
Question Paper Generation Pipeline
generation/

Steps:
0. Request validation: non-zero total, known course outcomes
1. Availability Checker: enough questions per cell, first shortage wins
2. Balanced Selector: per-outcome random draw or round-robin across outcomes
3. CO Mapper: course outcome label → CO code
4. Paper Assembler: Part A / Part B, running numbers, [OR] rows, totals
"""
