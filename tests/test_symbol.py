from symtab.symbol import SymbolInfo


def test_simple_type():
    assert SymbolInfo("x", "INT").render() == "<x,INT>"


def test_function_type():
    symbol = SymbolInfo("foo", "FUNCTION INT INT FLOAT INT")
    assert symbol.render() == "<foo,FUNCTION,INT<==(INT,FLOAT,INT)>"


def test_function_without_parameters():
    assert SymbolInfo("f", "FUNCTION VOID").render() == "<f,FUNCTION,VOID<==()>"


def test_struct_type():
    symbol = SymbolInfo("car", "STRUCT INT n_doors BOOL is_electric STRING brand")
    assert symbol.render() == "<car,STRUCT,{(INT,n_doors),(BOOL,is_electric),(STRING,brand)}>"


def test_union_drops_unpaired_field():
    symbol = SymbolInfo("u", "UNION INT a FLOAT")
    assert symbol.render() == "<u,UNION,{(INT,a)}>"


def test_empty_struct():
    assert SymbolInfo("s", "STRUCT").render() == "<s,STRUCT,{}>"


def test_many_function_parameters():
    params = [f"T{i}" for i in range(25)]
    symbol = SymbolInfo("g", "FUNCTION INT " + " ".join(params))
    rendered = symbol.render()
    assert rendered.startswith("<g,FUNCTION,INT<==(")
    assert rendered[len("<g,FUNCTION,INT<==("):-2].split(",") == params


def test_str_matches_render():
    symbol = SymbolInfo("car", "STRUCT INT n_doors")
    assert str(symbol) == symbol.render()


def test_fields_are_mutable():
    symbol = SymbolInfo("x", "INT")
    symbol.type = "FLOAT"
    assert symbol.render() == "<x,FLOAT>"