# React Router & Navigation: code examples

examples = {
    "router-setup-basics": [
        {
            "title": "Full Application Routing Setup",
            "description": (
                "A complete React Router v6 setup with BrowserRouter, multiple routes, "
                "a shared navbar with NavLink, and a 404 catch-all page."
            ),
            "language": "javascript",
            "code": """import { BrowserRouter, Routes, Route, NavLink } from "react-router-dom";

function Navbar() {
  const linkClass = ({ isActive }) => (isActive ? "active" : undefined);
  return (
    <nav>
      <NavLink to="/" end className={linkClass}>Home</NavLink>
      <NavLink to="/about" className={linkClass}>About</NavLink>
    </nav>
  );
}

export default function App() {
  return (
    <BrowserRouter>
      <Navbar />
      <Routes>
        <Route path="/" element={<h1>Home</h1>} />
        <Route path="/about" element={<h1>About</h1>} />
        <Route path="*" element={<h1>404 - Page Not Found</h1>} />
      </Routes>
    </BrowserRouter>
  );
}""",
            "explanation": (
                "BrowserRouter provides the history context, Routes picks the best match, and the "
                "`*` route catches anything unmatched. The `end` prop keeps the Home link from "
                "matching every path."
            ),
            "order_index": 1,
        },
    ],
    "dynamic-routes-protected": [
        {
            "title": "Dynamic Product Page with useParams & useSearchParams",
            "description": (
                "A product catalog that combines dynamic route segments with search params "
                "for filtering."
            ),
            "language": "javascript",
            "code": """function ProductDetail() {
  const { productId } = useParams();
  const [searchParams] = useSearchParams();
  const tab = searchParams.get("tab") || "overview";
  return <h1>Product {productId} ({tab})</h1>;
}

<Route path="/products/:productId" element={<ProductDetail />} />""",
            "explanation": (
                "Path segments identify the resource; query strings carry view state such as "
                "the selected tab, so both survive a page refresh."
            ),
            "order_index": 1,
        },
    ],
}
