"""
Aggregation expression operator table.

Method names are the snake_case form of MongoDB's operator names.  Python
keywords carry a trailing underscore (``in_``, ``not_``, ``if_``, ``as_``).
Arity follows the MongoDB aggregation operator reference.
"""

from __future__ import annotations

from .signatures import OperatorSignature

_op = OperatorSignature

_ONE = ("expression",)
_TWO = ("expression1", "expression2")
_INDEX_OF_RANGE = (("start", None), ("end", None))

# fmt: off
EXPRESSION_OPERATORS: tuple[OperatorSignature, ...] = (
    # -- arithmetic ------------------------------------------------------------
    _op("abs", "$abs", ("number",), doc="Return the absolute value of a number."),
    _op("add", "$add", _TWO, variadic="expressions",
        doc="Add numbers together, or add numbers and a date."),
    _op("ceil", "$ceil", ("number",),
        doc="Return the smallest integer greater than or equal to the number."),
    _op("divide", "$divide", _TWO, doc="Divide one number by another."),
    _op("exp", "$exp", ("exponent",), doc="Raise Euler's number to the exponent."),
    _op("floor", "$floor", ("number",),
        doc="Return the largest integer less than or equal to the number."),
    _op("ln", "$ln", ("number",), doc="Return the natural logarithm of a number."),
    _op("log", "$log", ("number", "base"),
        doc="Return the log of a number in the specified base."),
    _op("log10", "$log10", ("number",), doc="Return the log base 10 of a number."),
    _op("mod", "$mod", _TWO, doc="Return the remainder of dividing the first number by the second."),
    _op("multiply", "$multiply", _TWO, variadic="expressions",
        doc="Multiply numbers together."),
    _op("pow", "$pow", ("number", "exponent"), doc="Raise a number to the exponent."),
    _op("sqrt", "$sqrt", _ONE, doc="Return the square root of a positive number."),
    _op("subtract", "$subtract", _TWO,
        doc="Subtract the second number (or date) from the first."),
    _op("trunc", "$trunc", ("number",), doc="Truncate a number to its integer."),
    # -- boolean ---------------------------------------------------------------
    _op("add_and", "$and", ("expression",), variadic="expressions",
        doc="Add one or more expressions to an ``$and`` clause."),
    _op("add_or", "$or", ("expression",), variadic="expressions",
        doc="Add one or more expressions to an ``$or`` clause."),
    _op("not_", "$not", _ONE, doc="Return the opposite boolean value."),
    # -- comparison ------------------------------------------------------------
    _op("cmp", "$cmp", _TWO, doc="Compare two values, returning -1, 0 or 1."),
    _op("eq", "$eq", _TWO, doc="Return whether two values are equivalent."),
    _op("gt", "$gt", _TWO, doc="Return whether the first value is greater than the second."),
    _op("gte", "$gte", _TWO,
        doc="Return whether the first value is greater than or equal to the second."),
    _op("lt", "$lt", _TWO, doc="Return whether the first value is less than the second."),
    _op("lte", "$lte", _TWO,
        doc="Return whether the first value is less than or equal to the second."),
    _op("ne", "$ne", _TWO, doc="Return whether two values are not equivalent."),
    # -- conditional -----------------------------------------------------------
    _op("cond", "$cond", ("if_", "then", "else_"),
        doc="Evaluate a boolean expression and return one of two values."),
    _op("if_null", "$ifNull", ("expression", "replacement_expression"),
        doc="Return the expression, or the replacement when it is null or missing."),
    _op("switch", "$switch", doc="Start a ``$switch`` expression; add branches with case()."),
    _op("case", "$switch", _ONE, doc="Add a ``$switch`` branch guarded by the expression."),
    _op("then", "$switch", _ONE, doc="Set the value returned by the current ``$switch`` branch."),
    _op("default", "$switch", _ONE,
        doc="Set the value returned when no ``$switch`` branch matches."),
    # -- array -----------------------------------------------------------------
    _op("all_elements_true", "$allElementsTrue", _ONE,
        doc="Return true if no element of the set is false."),
    _op("any_element_true", "$anyElementTrue", _ONE,
        doc="Return true if any element of the set is true."),
    _op("array_elem_at", "$arrayElemAt", ("array", "index"),
        doc="Return the element at the specified array index."),
    _op("concat_arrays", "$concatArrays", ("array1", "array2"), variadic="arrays",
        doc="Concatenate arrays."),
    _op("filter", "$filter", ("input", "as_", "cond"),
        doc="Select the array elements matching a condition."),
    _op("in_", "$in", ("expression", "array_expression"),
        doc="Return whether a value is in an array."),
    _op("index_of_array", "$indexOfArray", ("array_expression", "search_expression"),
        defaults=_INDEX_OF_RANGE,
        doc="Return the index of the first occurrence of a value in an array."),
    _op("is_array", "$isArray", _ONE, doc="Return whether the operand is an array."),
    _op("map", "$map", ("input", "as_", "in_"),
        doc="Apply an expression to each array element."),
    _op("range", "$range", ("start", "end"), defaults=(("step", 1),),
        doc="Return an array of integers in a sequence."),
    _op("reduce", "$reduce", ("input", "initial_value", "in_"),
        doc="Combine array elements into a single value."),
    _op("reverse_array", "$reverseArray", _ONE,
        doc="Return the array with its elements in reverse order."),
    _op("size", "$size", _ONE, doc="Return the number of items in an array."),
    _op("slice", "$slice", ("array", "n"), defaults=(("position", None),),
        doc="Return a subset of an array."),
    _op("zip", "$zip", ("inputs",),
        defaults=(("use_longest_length", None), ("defaults", None)),
        doc="Transpose an array of input arrays."),
    # -- set -------------------------------------------------------------------
    _op("set_difference", "$setDifference", _TWO,
        doc="Return the elements of the first set missing from the second."),
    _op("set_equals", "$setEquals", _TWO, variadic="expressions",
        doc="Return whether the sets have the same distinct elements."),
    _op("set_intersection", "$setIntersection", _TWO, variadic="expressions",
        doc="Return the elements present in every set."),
    _op("set_is_subset", "$setIsSubset", _TWO,
        doc="Return whether the first set is a subset of the second."),
    _op("set_union", "$setUnion", _TWO, variadic="expressions",
        doc="Return the elements present in any set."),
    # -- string ----------------------------------------------------------------
    _op("concat", "$concat", _TWO, variadic="expressions",
        doc="Concatenate strings."),
    _op("index_of_bytes", "$indexOfBytes", ("string_expression", "substring_expression"),
        defaults=_INDEX_OF_RANGE,
        doc="Return the UTF-8 byte index of the first occurrence of a substring."),
    _op("index_of_cp", "$indexOfCP", ("string_expression", "substring_expression"),
        defaults=_INDEX_OF_RANGE,
        doc="Return the UTF-8 code point index of the first occurrence of a substring."),
    _op("split", "$split", ("string", "delimiter"),
        doc="Split a string into an array of substrings."),
    _op("strcasecmp", "$strcasecmp", _TWO,
        doc="Compare two strings case-insensitively."),
    _op("str_len_bytes", "$strLenBytes", ("string",),
        doc="Return the number of UTF-8 bytes in a string."),
    _op("str_len_cp", "$strLenCP", ("string",),
        doc="Return the number of UTF-8 code points in a string."),
    _op("substr", "$substr", ("string", "start", "length"),
        doc="Return a substring."),
    _op("substr_bytes", "$substrBytes", ("string", "start", "count"),
        doc="Return a substring using UTF-8 byte indexes."),
    _op("substr_cp", "$substrCP", ("string", "start", "count"),
        doc="Return a substring using UTF-8 code point indexes."),
    _op("to_lower", "$toLower", _ONE, doc="Convert a string to lowercase."),
    _op("to_upper", "$toUpper", _ONE, doc="Convert a string to uppercase."),
    # -- date ------------------------------------------------------------------
    _op("date_to_string", "$dateToString", ("format", "expression"),
        doc="Format a date according to a format string."),
    _op("day_of_month", "$dayOfMonth", _ONE, doc="Return the day of the month (1-31)."),
    _op("day_of_week", "$dayOfWeek", _ONE, doc="Return the day of the week (1-7)."),
    _op("day_of_year", "$dayOfYear", _ONE, doc="Return the day of the year (1-366)."),
    _op("hour", "$hour", _ONE, doc="Return the hour (0-23)."),
    _op("iso_day_of_week", "$isoDayOfWeek", _ONE,
        doc="Return the ISO 8601 weekday (1 for Monday to 7 for Sunday)."),
    _op("iso_week", "$isoWeek", _ONE, doc="Return the ISO 8601 week number (1-53)."),
    _op("iso_week_year", "$isoWeekYear", _ONE, doc="Return the ISO 8601 week-numbering year."),
    _op("millisecond", "$millisecond", _ONE, doc="Return the milliseconds (0-999)."),
    _op("minute", "$minute", _ONE, doc="Return the minute (0-59)."),
    _op("month", "$month", _ONE, doc="Return the month (1-12)."),
    _op("second", "$second", _ONE, doc="Return the seconds (0-60)."),
    _op("week", "$week", _ONE, doc="Return the week of the year (0-53)."),
    _op("year", "$year", _ONE, doc="Return the year."),
    # -- variables, literals and misc ------------------------------------------
    _op("expression", "", ("value",),
        doc="Use an expression (or plain value) as the current field value."),
    _op("field", "", ("field_name",), doc="Set the current field for building the expression."),
    _op("let", "$let", ("vars", "in_"),
        doc="Bind variables for use in the specified expression."),
    _op("literal", "$literal", ("value",), doc="Return a value without parsing."),
    _op("meta", "$meta", ("meta_data_keyword",),
        doc="Return the metadata associated with a document."),
    _op("type", "$type", _ONE, doc="Return the BSON type of the argument."),
)
# fmt: on

_ACCUMULATOR_DOCS = {
    "add_to_set": ("$addToSet", "Return an array of unique values per group."),
    "avg": ("$avg", "Return the average of numeric values."),
    "first": ("$first", "Return the value from the first document of each group."),
    "last": ("$last", "Return the value from the last document of each group."),
    "max": ("$max", "Return the highest value."),
    "min": ("$min", "Return the lowest value."),
    "push": ("$push", "Return an array of all values per group."),
    "std_dev_pop": ("$stdDevPop", "Return the population standard deviation."),
    "std_dev_samp": ("$stdDevSamp", "Return the sample standard deviation."),
    "sum": ("$sum", "Return the sum of numeric values."),
}

GROUP_ACCUMULATORS: tuple[OperatorSignature, ...] = tuple(
    _op(name, operator, _ONE, doc=doc)
    for name, (operator, doc) in _ACCUMULATOR_DOCS.items()
)

# In $project and $addFields these accept either one array or several operands.
PROJECT_ACCUMULATORS: tuple[OperatorSignature, ...] = tuple(
    _op(name, operator, _ONE, variadic="expressions", doc=doc)
    for name, (operator, doc) in _ACCUMULATOR_DOCS.items()
    if name in {"avg", "max", "min", "std_dev_pop", "std_dev_samp", "sum"}
)
