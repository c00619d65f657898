"""Worked solutions to many of the course's exercise topics."""