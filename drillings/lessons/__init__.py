"""Worked solutions to the lessons, written as plain functions and classes."""