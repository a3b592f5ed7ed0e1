"""
Transport Orders: разбор PDF транспортных заявок перевозчиков.
"""
